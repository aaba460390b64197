from huffpack.__main__ import main
from huffpack.encoding_schemes.huffman import huffman_encode
from huffpack.utils import bytes_to_bitstring, pack_bits, write_code_table, write_payload


TEXT = "Blessed are the meek: for they shall inherit the earth.\n"


def test_compress_then_decompress_framed(tmp_path, capsys):
    src = tmp_path / "matthew.txt"
    src.write_text(TEXT, encoding="utf-8")
    codes = tmp_path / "codes.txt"
    payload = tmp_path / "compressed.txt"

    assert main(["compress", str(src), "--codes", str(codes), "--output", str(payload), "--framed"]) == 0
    out = capsys.readouterr().out
    assert "The compression ratio:" in out
    assert f"The original file size: {len(TEXT) * 8} bits" in out

    decoded = tmp_path / "decoded.txt"
    assert main(["decompress", str(payload), "--codes", str(codes), "--output", str(decoded)]) == 0
    assert decoded.read_text(encoding="utf-8") == TEXT


def test_bare_payload_needs_bit_length(tmp_path, capsys):
    src = tmp_path / "matthew.txt"
    src.write_text(TEXT, encoding="utf-8")
    codes = tmp_path / "codes.txt"
    payload = tmp_path / "compressed.txt"
    assert main(["compress", str(src), "--codes", str(codes), "--output", str(payload)]) == 0
    capsys.readouterr()

    assert main(["decompress", str(payload), "--codes", str(codes)]) == 1
    assert "Error:" in capsys.readouterr().err

    bit_length = huffman_encode(TEXT).bit_length
    assert main(["decompress", str(payload), "--codes", str(codes), "--bit-length", str(bit_length)]) == 0
    assert capsys.readouterr().out == TEXT



def test_bit_length_payload_is_never_read_as_framed(tmp_path, capsys):
    bits = bytes_to_bitstring(b"HUF1" + bytes(range(1, 21))) + "1"
    codes = tmp_path / "codes.txt"
    payload = tmp_path / "compressed.txt"
    write_code_table(codes, {"a": "0", "b": "1"})
    write_payload(payload, pack_bits(bits))

    assert main(["decompress", str(payload), "--codes", str(codes), "--bit-length", str(len(bits))]) == 0
    assert capsys.readouterr().out == "".join("a" if bit == "0" else "b" for bit in bits)

def test_legacy_options(tmp_path, capsys):
    src = tmp_path / "legacy.txt"
    src.write_text("abab\n", encoding="utf-8")
    codes = tmp_path / "codes.txt"
    payload = tmp_path / "compressed.txt"

    # the trailing '\r' never occurs before the last position, so it gets no code
    rc = main([
        "compress", str(src), "--codes", str(codes), "--output", str(payload),
        "--line-terminator", "cr", "--legacy-window",
    ])
    assert rc == 1
    assert "No Huffman code" in capsys.readouterr().err


def test_missing_input_is_reported(tmp_path, capsys):
    assert main(["compress", str(tmp_path / "missing.txt")]) == 1
    assert "cannot read corpus" in capsys.readouterr().err


def test_batch_command(tmp_path, capsys):
    corpus = tmp_path / "corpus"
    corpus.mkdir()
    (corpus / "a.txt").write_text(TEXT, encoding="utf-8")
    out = tmp_path / "out"

    assert main(["batch", str(corpus), str(out), "--report-formats", "json"]) == 0
    assert "Compressed 1 file(s)" in capsys.readouterr().out
    assert (out / "out_decoded" / "a_decoded.txt").read_text(encoding="utf-8") == TEXT
    assert (out / "report" / "report.json").exists()
