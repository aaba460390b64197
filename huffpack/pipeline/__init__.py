from huffpack.pipeline.config import CompressionConfig
from huffpack.pipeline.huffman_runner import (
    CompressionResult,
    compress_file,
    compress_text,
    decompress_file,
    decompress_payload,
)


def run_batch_on_folder(*args, **kwargs):
    # Lazy import so importing `huffpack.pipeline` doesn't pull in the batch
    # report writer unless batch execution is actually requested.
    from huffpack.utils.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "CompressionConfig",
    "CompressionResult",
    "compress_file",
    "compress_text",
    "decompress_file",
    "decompress_payload",
    "run_batch_on_folder",
]
