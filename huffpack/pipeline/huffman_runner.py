import time
from dataclasses import dataclass
from pathlib import Path

from huffpack.encoding_schemes.huffman import HuffmanEncoded, huffman_decode, huffman_encode
from huffpack.errors import MalformedCodeError
from huffpack.pipeline.config import CompressionConfig
from huffpack.reporting.report import CompressionStats, compute_stats
from huffpack.utils import (
    attach_frame_header,
    detach_frame_header,
    pack_bits,
    read_code_table,
    read_corpus,
    read_payload,
    unpack_bits,
    write_code_table,
    write_payload,
)


@dataclass
class CompressionResult:
    """
    Everything produced by compressing one text.

    - encoded: bits and code table
    - payload: bytes to store (framed or not, per config)
    - elapsed_seconds: time spent encoding and packing
    """
    encoded: HuffmanEncoded
    payload: bytes
    elapsed_seconds: float


def compress_text(text: str, cfg: CompressionConfig | None = None) -> CompressionResult:
    """
    Huffman-encode a text and pack the bits into bytes.
    """
    if cfg is None:
        cfg = CompressionConfig()

    start = time.perf_counter()
    encoded = huffman_encode(
        text,
        exclude_last=cfg.exclude_last_symbol,
        single_symbol_code=cfg.single_symbol_code,
    )
    payload = pack_bits(encoded.bits)
    if cfg.framed:
        payload = attach_frame_header(payload, encoded.bit_length, encoded.symbol_count)
    elapsed = time.perf_counter() - start

    return CompressionResult(encoded=encoded, payload=payload, elapsed_seconds=elapsed)


def compress_file(
    in_path: Path,
    codes_path: Path,
    payload_path: Path,
    cfg: CompressionConfig | None = None,
) -> CompressionStats:
    """
    Compress one corpus file, writing its code table and payload.
    Returns the compression statistics.
    """
    if cfg is None:
        cfg = CompressionConfig()

    in_path = Path(in_path)
    text = read_corpus(in_path, encoding=cfg.encoding, line_terminator=cfg.line_terminator)
    result = compress_text(text, cfg)

    write_code_table(codes_path, result.encoded.codes, encoding=cfg.encoding)
    written = write_payload(payload_path, result.payload)

    return compute_stats(
        original_bytes=in_path.stat().st_size,
        compressed_bytes=written,
        encoded=result.encoded,
        elapsed_seconds=result.elapsed_seconds,
    )


def decompress_payload(
    payload: bytes,
    codes: dict,
    bit_length: int | None = None,
):
    """
    Decode a payload produced by `compress_text`.

    A framed payload carries its own bit length; a bare one needs `bit_length`,
    since its last byte may hold fewer than 8 bits. When `bit_length` is given
    the payload is taken as bare, even if its first bytes look like a header.
    """
    body = payload
    symbol_count = 0
    if bit_length is None:
        meta, body = detach_frame_header(payload)
        if not meta:
            raise MalformedCodeError(
                "payload has no frame header; the bit length must be supplied to decode it"
            )
        bit_length = meta["bit_length"]
        symbol_count = meta["symbol_count"]

    bits = unpack_bits(body, bit_length)
    encoded = HuffmanEncoded(bits=bits, codes=codes, symbol_count=symbol_count)
    return huffman_decode(encoded)


def decompress_file(
    payload_path: Path,
    codes_path: Path,
    out_path: Path | None = None,
    bit_length: int | None = None,
    cfg: CompressionConfig | None = None,
) -> str:
    """
    Decode a compressed file with its code table; optionally write the text out.
    """
    if cfg is None:
        cfg = CompressionConfig()

    codes = read_code_table(codes_path, encoding=cfg.encoding)
    text = decompress_payload(read_payload(payload_path), codes, bit_length=bit_length)

    if out_path is not None:
        write_payload(out_path, text.encode(cfg.encoding))
    return text
