import pytest

from huffpack.encoding_schemes.huffman import huffman_encode
from huffpack.errors import EmptyInputError, MalformedCodeError
from huffpack.pipeline import (
    CompressionConfig,
    compress_file,
    compress_text,
    decompress_file,
    decompress_payload,
)
from huffpack.reporting.report import compute_stats, format_stats
from huffpack.utils import bytes_to_bitstring, pack_bits


def test_compress_text_bare_payload():
    result = compress_text("aaabbc")
    assert result.encoded.bits == "000111110"
    assert result.payload == bytes([0b00011111, 0])
    assert result.elapsed_seconds >= 0


def test_compress_text_framed_roundtrip():
    cfg = CompressionConfig(framed=True)
    text = "In the beginning God created the heaven and the earth.\r"
    result = compress_text(text, cfg)
    assert decompress_payload(result.payload, result.encoded.codes) == text


def test_bare_payload_needs_bit_length():
    result = compress_text("abracadabra")
    with pytest.raises(MalformedCodeError):
        decompress_payload(result.payload, result.encoded.codes)

    decoded = decompress_payload(
        result.payload, result.encoded.codes, bit_length=result.encoded.bit_length
    )
    assert decoded == "abracadabra"


def test_bare_payload_starting_with_magic_bytes():
    bits = bytes_to_bitstring(b"HUF1" + bytes(range(1, 21))) + "1"
    codes = {"a": "0", "b": "1"}
    payload = pack_bits(bits)
    assert payload.startswith(b"HUF1")

    expected = "".join("a" if bit == "0" else "b" for bit in bits)
    assert decompress_payload(payload, codes, bit_length=len(bits)) == expected


def test_compress_text_empty_raises():
    with pytest.raises(EmptyInputError):
        compress_text("")


def test_compress_file_writes_outputs(tmp_path):
    src = tmp_path / "bible.txt"
    src.write_text("and God said let there be light\nand there was light\n", encoding="utf-8")
    codes_path = tmp_path / "codes.txt"
    payload_path = tmp_path / "compressed.txt"

    stats = compress_file(src, codes_path, payload_path, CompressionConfig(line_terminator="\r"))

    expected = huffman_encode("and God said let there be light\rand there was light\r")
    assert payload_path.read_bytes() == pack_bits(expected.bits)
    assert stats.original_bits == src.stat().st_size * 8
    assert stats.compressed_bits == payload_path.stat().st_size * 8
    assert stats.alphabet_size == len(expected.codes)
    assert 0 < stats.ratio_percent < 100

    decoded = decompress_file(
        payload_path, codes_path, bit_length=expected.bit_length
    )
    assert decoded == "and God said let there be light\rand there was light\r"


def test_decompress_file_framed_writes_text(tmp_path):
    src = tmp_path / "in.txt"
    text = "to be or not to be\nthat is the question\n"
    src.write_bytes(text.encode("utf-8"))
    cfg = CompressionConfig(framed=True)
    compress_file(src, tmp_path / "codes.txt", tmp_path / "out.bin", cfg)

    out_path = tmp_path / "decoded.txt"
    decompress_file(tmp_path / "out.bin", tmp_path / "codes.txt", out_path=out_path, cfg=cfg)
    assert out_path.read_bytes() == src.read_bytes()


def test_stats_block():
    stats = compute_stats(original_bytes=200, compressed_bytes=110, elapsed_seconds=0.25)
    block = format_stats(stats)
    assert "The original file size: 1600 bits" in block
    assert "The compressed file size: 880 bits" in block
    assert "The compression ratio: 55%" in block
    assert "The elapsed time for encoding and packing: 0.250 seconds" in block


@pytest.mark.parametrize("encoding", ["utf-16", "utf-32", "latin-1"])
def test_file_roundtrip_in_other_encodings(tmp_path, encoding):
    src = tmp_path / "in.txt"
    src.write_bytes("abracadabra\n= sim sala bim\n".encode(encoding))
    cfg = CompressionConfig(encoding=encoding, framed=True)
    compress_file(src, tmp_path / "codes.txt", tmp_path / "out.bin", cfg)

    out_path = tmp_path / "decoded.txt"
    decompress_file(tmp_path / "out.bin", tmp_path / "codes.txt", out_path=out_path, cfg=cfg)
    assert out_path.read_bytes() == src.read_bytes()
