import os
from pathlib import Path
from typing import Dict

from huffpack.errors import CompressionIOError, HuffmanError
from huffpack.pipeline.config import CompressionConfig
from huffpack.pipeline.huffman_runner import compress_file, decompress_file
from huffpack.reporting.report import CompressionStats, generate_report
from huffpack.utils.file_utils import add_suffix_to_top_level, suffix_filename


def _output_path(root: Path, rel_root: Path, in_path: Path, suffix: str) -> Path:
    out_dir = root / add_suffix_to_top_level(rel_root, suffix)
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir / suffix_filename(Path(in_path.name), suffix).name


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: CompressionConfig | None = None,
) -> Dict[str, CompressionStats]:
    """
    Compress every file under input_root.

    Writes code tables to out_codes/, payloads to out_compressed/ and, for
    framed payloads, the decompressed copy to out_decoded/, then a report
    under output_root/report. Returns stats keyed by relative input path.
    """
    if cfg is None:
        cfg = CompressionConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()

    out_codes_root = output_root / "out_codes"
    out_compressed_root = output_root / "out_compressed"
    out_decoded_root = output_root / "out_decoded"

    results: Dict[str, CompressionStats] = {}
    for root, _, files in os.walk(input_root):
        root_path = Path(root)
        rel_root = root_path.relative_to(input_root)

        for filename in sorted(files):
            in_path = root_path / filename
            print("Processing:", in_path)
            try:
                stats = process_file(
                    in_path=in_path,
                    rel_root=rel_root,
                    out_codes_root=out_codes_root,
                    out_compressed_root=out_compressed_root,
                    out_decoded_root=out_decoded_root,
                    cfg=cfg,
                )
            except (CompressionIOError, HuffmanError) as exc:
                print(f"Skipping {in_path}: {exc}")
                continue
            results[str(in_path.relative_to(input_root))] = stats

    if cfg.report_formats:
        generate_report(
            input_root=input_root,
            output_root=output_root,
            report_dir=output_root / "report",
            formats=cfg.report_formats,
            compressed_suffix=cfg.compressed_suffix,
        )
    return results


def process_file(
    in_path: Path,
    rel_root: Path,
    out_codes_root: Path,
    out_compressed_root: Path,
    out_decoded_root: Path,
    cfg: CompressionConfig,
) -> CompressionStats:
    codes_path = _output_path(out_codes_root, rel_root, in_path, cfg.codes_suffix)
    compressed_path = _output_path(out_compressed_root, rel_root, in_path, cfg.compressed_suffix)

    stats = compress_file(in_path, codes_path, compressed_path, cfg)
    print("Compressed output:", compressed_path)

    # A bare payload cannot be decoded without its bit length.
    if cfg.framed:
        decoded_path = _output_path(out_decoded_root, rel_root, in_path, "_decoded")
        decompress_file(compressed_path, codes_path, out_path=decoded_path, cfg=cfg)
        print("Decoded output:", decoded_path)

    return stats
