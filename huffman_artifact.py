# filename: huffman_artifact.py
#
# Artifact layout, integers little-endian:
#   u64 packed length | packed bytes
#   u64 entry count   | entries: u8 value, u64 code length, ASCII '0'/'1' code
#   u64 original byte count

import struct

from huffman_core import is_prefix_code
from huffman_errors import CorruptArtifactError

_U8 = struct.Struct("<B")
_U64 = struct.Struct("<Q")
_CODE_CHARS = frozenset(b"01")


def serialize(packed, codes, count):
    out = bytearray()
    out += _U64.pack(len(packed))
    out += packed
    out += _U64.pack(len(codes))
    for value in sorted(codes):
        code = codes[value].encode("ascii")
        out += _U8.pack(value)
        out += _U64.pack(len(code))
        out += code
    out += _U64.pack(count)
    return bytes(out)


class _Reader:
    def __init__(self, blob):
        self.blob = blob
        self.offset = 0

    def take(self, size, what):
        end = self.offset + size
        if end > len(self.blob):
            raise CorruptArtifactError(
                f"truncated artifact: {what} needs {size} bytes at offset {self.offset}, "
                f"only {len(self.blob) - self.offset} left"
            )
        chunk = self.blob[self.offset:end]
        self.offset = end
        return chunk

    def unpack(self, fmt, what):
        return fmt.unpack(self.take(fmt.size, what))[0]


def deserialize(blob):
    """Parse an artifact into ``(packed, codes, count)``."""
    reader = _Reader(bytes(blob))

    packed_length = reader.unpack(_U64, "packed length")
    packed = reader.take(packed_length, "packed stream")

    entries = reader.unpack(_U64, "code table size")
    if entries > 256:
        raise CorruptArtifactError(f"code table claims {entries} entries")
    codes = {}
    for _ in range(entries):
        value = reader.unpack(_U8, "code table value")
        code_length = reader.unpack(_U64, "code length")
        code = reader.take(code_length, "code")
        if not code or not _CODE_CHARS.issuperset(code):
            raise CorruptArtifactError(f"invalid code {code!r} for byte value {value}")
        if value in codes:
            raise CorruptArtifactError(f"duplicate code table entry for byte value {value}")
        codes[value] = code.decode("ascii")

    count = reader.unpack(_U64, "byte count")
    if reader.offset != len(reader.blob):
        raise CorruptArtifactError(
            f"{len(reader.blob) - reader.offset} unexpected trailing bytes"
        )
    if count and not codes:
        raise CorruptArtifactError(f"artifact holds {count} bytes but no code table")
    if not is_prefix_code(codes):
        raise CorruptArtifactError("code table is not a prefix code")
    return packed, codes, count
