# filename: huffman_service.py

import logging
import os
import tempfile

import huffman_artifact
import huffman_bits
from huffman_core import HuffmanLogic
from huffman_errors import HuffmanIOError

logger = logging.getLogger(__name__)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def code_table(self, data):
        if not data:
            return {}
        return self.logic.build_codes(data)

    def _encode(self, data):
        codes = self.code_table(data)
        packed, bit_length = huffman_bits.pack(data, codes)
        logger.debug("%d distinct symbols, %d bits packed into %d bytes",
                     len(codes), bit_length, len(packed))
        return packed, codes, bit_length

    def compress_bytes(self, data):
        data = bytes(data)
        # Empty input never reaches the tree builder; its artifact decodes to b""
        packed, codes, _ = self._encode(data)
        return huffman_artifact.serialize(packed, codes, len(data))

    def decompress_bytes(self, blob):
        packed, codes, count = huffman_artifact.deserialize(blob)
        return huffman_bits.unpack(packed, codes, count)

    def stats(self, data):
        data = bytes(data)
        packed, codes, bit_length = self._encode(data)
        compressed_size = len(huffman_artifact.serialize(packed, codes, len(data)))
        return {
            "original_size": len(data),
            "compressed_size": compressed_size,
            "packed_size": len(packed),
            "distinct_symbols": len(codes),
            "bit_length": bit_length,
            "ratio": compressed_size / len(data) if data else None,
        }

    def compress(self, source, sink):
        data = _read_stream(source)
        artifact = self.compress_bytes(data)
        _write_stream(sink, artifact)
        logger.info("compressed %d bytes into %d bytes", len(data), len(artifact))
        return True

    def decompress(self, source, sink):
        blob = _read_stream(source)
        data = self.decompress_bytes(blob)
        _write_stream(sink, data)
        logger.info("decompressed %d bytes into %d bytes", len(blob), len(data))
        return True

    def compress_file(self, src, dst):
        data = read_file(src)
        artifact = self.compress_bytes(data)
        self._write_file(dst, artifact)
        logger.info("compressed %s (%d bytes) -> %s (%d bytes)",
                    src, len(data), dst, len(artifact))
        return True

    def decompress_file(self, src, dst):
        blob = read_file(src)
        data = self.decompress_bytes(blob)
        self._write_file(dst, data)
        logger.info("decompressed %s (%d bytes) -> %s (%d bytes)",
                    src, len(blob), dst, len(data))
        return True

    def _write_file(self, path, payload):
        # Stage next to the destination so the final rename stays on one filesystem
        directory = os.path.dirname(os.path.abspath(path))
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=".huffpack-", dir=directory)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            # mkstemp creates 0600 files; use the mode open() would have given
            os.chmod(tmp_path, 0o666 & ~_current_umask())
            os.replace(tmp_path, path)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise HuffmanIOError("write", str(path), exc) from exc


def read_file(path):
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise HuffmanIOError("read", str(path), exc) from exc


def _read_stream(source):
    try:
        return source.read()
    except OSError as exc:
        raise HuffmanIOError("read", getattr(source, "name", "<stream>"), exc) from exc


def _write_stream(sink, payload):
    try:
        sink.write(payload)
    except OSError as exc:
        raise HuffmanIOError("write", getattr(sink, "name", "<stream>"), exc) from exc


def _current_umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask
