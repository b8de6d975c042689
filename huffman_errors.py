# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for every failure raised by the compressor."""


class HuffmanIOError(HuffmanError, OSError):
    """Reading the source or writing the destination failed."""

    def __init__(self, operation, path, cause=None):
        self.operation = operation
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"cannot {operation} {path!r}{detail}")


class EmptyInputError(HuffmanError):
    """A Huffman tree was requested for zero distinct byte values."""


class CorruptArtifactError(HuffmanError):
    """The artifact could not be parsed into packed bytes and a code table."""


class DecodeMismatchError(HuffmanError):
    """The packed bits do not decode to the expected number of bytes."""


class InvariantError(HuffmanError):
    """An internal contract was broken (malformed tree, missing code)."""
