from typing import Dict, Tuple
import struct

from huffpack.errors import MalformedCodeError

MAGIC = b"HUF1"
HEADER_FMT = ">4sQQ"  # magic, bit length (u64), symbol count (u64)
HEADER_SIZE = struct.calcsize(HEADER_FMT)


def attach_frame_header(payload: bytes, bit_length: int, symbol_count: int) -> bytes:
    """
    Prepend a small header recording how many bits and symbols the packed
    payload holds, so the last (unpadded) byte can be unpacked.
    """
    header = struct.pack(HEADER_FMT, MAGIC, bit_length, symbol_count)
    return header + payload


def detach_frame_header(data: bytes) -> Tuple[Dict[str, int], bytes]:
    """
    If a frame header is present, return metadata and the stripped payload.
    Otherwise, returns ({}, original_data).
    """
    if len(data) < HEADER_SIZE:
        return {}, data
    magic, bit_length, symbol_count = struct.unpack(HEADER_FMT, data[:HEADER_SIZE])
    if magic != MAGIC:
        return {}, data

    payload = data[HEADER_SIZE:]
    if len(payload) != (bit_length + 7) // 8:
        raise MalformedCodeError(
            f"frame header announces {bit_length} bits but payload has {len(payload)} bytes"
        )
    meta = {
        "bit_length": bit_length,
        "symbol_count": symbol_count,
    }
    return meta, payload
