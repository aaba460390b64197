"""Utility helpers shared across pipeline components."""

from huffpack.utils.file_utils import (
    add_suffix_to_top_level,
    suffix_filename,
    read_corpus,
    format_code_table,
    parse_code_table,
    write_code_table,
    read_code_table,
    write_payload,
    read_payload,
)
from huffpack.utils.framing import attach_frame_header, detach_frame_header
from huffpack.utils.bits_bytes_utils import (
    pack_bits,
    unpack_bits,
    bytes_to_bitstring,
)

__all__ = [
    "add_suffix_to_top_level",
    "suffix_filename",
    "read_corpus",
    "format_code_table",
    "parse_code_table",
    "write_code_table",
    "read_code_table",
    "write_payload",
    "read_payload",
    "attach_frame_header",
    "detach_frame_header",
    "pack_bits",
    "unpack_bits",
    "bytes_to_bitstring",
]
