"""Tests for the node model and the failure values."""

from minifs.errors import ErrorKind, Failure, MiniFSError
from minifs.nodes import Directory, File, Node, NodeType


class TestNodes:
    """Verify files and directories."""

    def test_file_defaults(self) -> None:
        """A new file has no content and an empty data slot."""
        entry = File("a.txt")
        assert entry.name == "a.txt"
        assert entry.content is None
        assert entry.data == {}
        assert entry.node_type is NodeType.FILE

    def test_directory_defaults(self) -> None:
        """A new directory is unnamed and empty."""
        entry = Directory()
        assert entry.name is None
        assert entry.content == {}
        assert entry.node_type is NodeType.DIRECTORY

    def test_data_is_keyword_only(self) -> None:
        """The data slot is passed by keyword."""
        entry = File("a.txt", "x", data={"k": 1})
        assert entry.data == {"k": 1}

    def test_data_not_shared(self) -> None:
        """Each node gets its own data dict."""
        first, second = Directory(), Directory()
        first.data["k"] = 1
        assert second.data == {}

    def test_both_are_nodes(self) -> None:
        """Files and directories share the Node base."""
        assert isinstance(File("a"), Node)
        assert isinstance(Directory(), Node)

    def test_base_node_has_no_type(self) -> None:
        """Only files and directories report a kind; the bare base does not."""
        node = Node(data={"k": 1})
        assert node.data == {"k": 1}
        assert not hasattr(node, "node_type")


class TestFailure:
    """Verify failure values and the exception built from them."""

    def test_str(self) -> None:
        """A failure renders with its operation prefix."""
        failure = Failure(ErrorKind.NOT_FOUND, "readFile", '"x" does not exist.', "x")
        assert str(failure) == '[MiniFS.readFile] "x" does not exist.'

    def test_to_error(self) -> None:
        """The exception carries the failure's details."""
        failure = Failure(ErrorKind.TYPE_MISMATCH, "remove", '"a" is a file.', "a")
        error = failure.to_error()
        assert isinstance(error, MiniFSError)
        assert error.failure is failure
        assert error.kind is ErrorKind.TYPE_MISMATCH
        assert error.operation == "remove"
        assert error.segment == "a"
        assert str(error) == str(failure)
