from huffpack.errors import MalformedCodeError


def _check_digits(bits: str) -> None:
    if not set(bits).issubset({"0", "1"}):
        raise ValueError("expected a bitstring containing only '0' and '1'.")


def pack_bits(bits: str) -> bytes:
    """
    Pack a bitstring into bytes, 8 digits per byte, most significant first.

    A final group of 1-7 digits is NOT padded: it is read as its own short
    binary number and written as one byte, e.g.
        '1101001011' -> b'\\xd2\\x03'   (11010010, then 11)
    The output does not record how many bits the last byte holds; keep the
    bit length elsewhere to unpack it.
    """
    _check_digits(bits)
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def unpack_bits(data: bytes, bit_length: int) -> str:
    """
    Reverse of `pack_bits` given the original number of bits.

    Every byte but the last expands to 8 digits; the last one expands to
    whatever is left of `bit_length` (1-8 digits).
    """
    if bit_length < 0:
        raise MalformedCodeError(f"bit_length must be non-negative, got {bit_length}")
    expected_bytes = (bit_length + 7) // 8
    if len(data) != expected_bytes:
        raise MalformedCodeError(
            f"{bit_length} bits pack into {expected_bytes} bytes, got {len(data)}"
        )
    if not data:
        return ""

    tail_bits = bit_length - 8 * (len(data) - 1)
    if data[-1] >= 1 << tail_bits:
        raise MalformedCodeError(
            f"last byte {data[-1]} does not fit in {tail_bits} bits"
        )
    head = bytes_to_bitstring(data[:-1])
    return head + f"{data[-1]:0{tail_bits}b}"


def bytes_to_bitstring(data: bytes) -> str:
    """Convert bytes -> bitstring (8 bits per byte)."""
    return "".join(f"{byte:08b}" for byte in data)

