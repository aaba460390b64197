from huffpack.encoding_schemes.frequency import count_frequencies
from huffpack.encoding_schemes.huffman_tree import HuffmanNode, build_huffman_tree
from huffpack.encoding_schemes.huffman import (
    HuffmanEncoded,
    build_code_table,
    decode_bits,
    encode_symbols,
    huffman_decode,
    huffman_encode,
    reverse_code_table,
)

__all__ = [
    "count_frequencies",
    "HuffmanNode",
    "build_huffman_tree",
    "HuffmanEncoded",
    "build_code_table",
    "decode_bits",
    "encode_symbols",
    "huffman_decode",
    "huffman_encode",
    "reverse_code_table",
]
