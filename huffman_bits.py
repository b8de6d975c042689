# filename: huffman_bits.py

from huffman_errors import DecodeMismatchError, InvariantError


def encode_bits(data, codes):
    try:
        return "".join([codes[value] for value in data])
    except KeyError as exc:
        raise InvariantError(f"no code for byte value {exc.args[0]!r}") from None


def pack(data, codes):
    """Concatenate the code of every byte and pack the bits MSB first.

    Returns ``(packed, bit_length)``; the last byte is zero padded on its
    low-order end when bit_length is not a multiple of 8.
    """
    bits = encode_bits(data, codes)
    bit_length = len(bits)
    if not bit_length:
        return b"", 0

    # Calculate padding needed for byte alignment
    padding = -bit_length % 8
    bits += "0" * padding
    packed = int(bits, 2).to_bytes(len(bits) // 8, "big")
    return packed, bit_length


def unpack(packed, codes, count):
    """Decode exactly ``count`` bytes from ``packed`` using ``codes``."""
    if count == 0:
        if packed:
            raise DecodeMismatchError(f"{len(packed)} packed bytes for an empty output")
        return b""
    if not codes:
        raise DecodeMismatchError(f"expected {count} bytes but the code table is empty")

    reverse = {code: value for value, code in codes.items()}
    longest = max(len(code) for code in reverse)

    bits = "".join(f"{byte:08b}" for byte in packed)
    result = bytearray()
    candidate = ""
    position = 0
    for position, bit in enumerate(bits, 1):
        candidate += bit
        value = reverse.get(candidate)
        if value is not None:
            result.append(value)
            candidate = ""
            if len(result) == count:
                break
        elif len(candidate) >= longest:
            raise DecodeMismatchError(
                f"bit run {candidate!r} at bit {position - len(candidate)} matches no code"
            )

    if len(result) < count:
        raise DecodeMismatchError(
            f"packed stream exhausted after {len(result)} of {count} bytes"
        )
    # Only the zero padding written by pack may follow the last byte
    leftover = bits[position:]
    if len(leftover) >= 8:
        raise DecodeMismatchError(
            f"{len(leftover)} bits remain after the last expected byte"
        )
    if "1" in leftover:
        raise DecodeMismatchError(
            f"padding {leftover!r} after the last expected byte is not zero"
        )
    return bytes(result)
