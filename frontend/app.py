"""Streamlit page: compress a text, inspect its Huffman code table and download the outputs."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from huffpack.errors import HuffmanError
from huffpack.pipeline import CompressionConfig, compress_text, decompress_payload
from huffpack.reporting.report import compute_stats, stats_to_dict
from huffpack.utils import format_code_table
from huffpack.utils.file_utils import join_lines

LINE_TERMINATOR_LABELS = {
    "Keep as is": None,
    "CR (legacy)": "\r",
    "LF": "\n",
}

st.set_page_config(
    page_title="Huffman Compressor",
    layout="wide",
    initial_sidebar_state="expanded",
)
if "current_result" not in st.session_state:
    st.session_state.current_result = None


def _printable(symbol) -> str:
    if isinstance(symbol, int):
        return f"0x{symbol:02x}"
    return repr(symbol)[1:-1]


def code_table_frame(codes: dict, frequencies: dict) -> pd.DataFrame:
    rows = [
        {
            "symbol": _printable(symbol),
            "count": frequencies.get(symbol, 0),
            "code": code,
            "length": len(code),
        }
        for symbol, code in codes.items()
    ]
    frame = pd.DataFrame(rows, columns=["symbol", "count", "code", "length"])
    return frame.sort_values(["length", "count"], ascending=[True, False], ignore_index=True)


with st.sidebar:
    st.markdown("## Configuration")
    terminator_label = st.selectbox(
        "Line endings",
        options=list(LINE_TERMINATOR_LABELS),
        index=0,
        help="Re-terminate every line before compressing.",
    )
    exclude_last = st.checkbox(
        "Legacy frequency window",
        value=False,
        help="Leave the last symbol out of the frequency count.",
    )
    framed = st.checkbox(
        "Framed payload",
        value=True,
        help="Prefix the payload with its bit length so it can be decompressed.",
    )

st.title("Huffman Compressor")
tab_input, tab_results = st.tabs(["Input", "Results"])

with tab_input:
    uploaded_file = st.file_uploader("Upload a text file:", type=["txt", "md", "csv", "log"])
    text_input = st.text_area(
        "Or paste text:",
        height=200,
        placeholder="Type or paste your text here...",
    )

    source_text = None
    if uploaded_file is not None:
        source_text = uploaded_file.read().decode("utf-8", errors="replace")
    elif text_input:
        source_text = text_input

    if source_text is not None:
        line_terminator = LINE_TERMINATOR_LABELS[terminator_label]
        if line_terminator is not None:
            source_text = join_lines(source_text, line_terminator)
        st.caption(f"{len(source_text)} characters")

    compress_button = st.button(
        "Compress",
        type="primary",
        disabled=(source_text is None),
    )

    if compress_button and source_text is not None:
        cfg = CompressionConfig(exclude_last_symbol=exclude_last, framed=framed)
        try:
            result = compress_text(source_text, cfg)
        except HuffmanError as exc:
            st.error(f"Error: {exc}")
        else:
            original_size = len(source_text.encode(cfg.encoding))
            stats = compute_stats(
                original_bytes=original_size,
                compressed_bytes=len(result.payload),
                encoded=result.encoded,
                elapsed_seconds=result.elapsed_seconds,
            )
            decoded = None
            if framed:
                decoded = decompress_payload(result.payload, result.encoded.codes)
            st.session_state.current_result = {
                "result": result,
                "stats": stats,
                "roundtrip_ok": None if decoded is None else decoded == source_text,
            }
            st.success("Complete! Switch to the Results tab to view output.")

with tab_results:
    current = st.session_state.current_result
    if current is None:
        st.info("Compress a text first.")
    else:
        result = current["result"]
        stats = current["stats"]

        col1, col2, col3, col4 = st.columns(4)
        col1.metric("Original", f"{stats.original_bits // 8} B")
        col2.metric("Compressed", f"{stats.compressed_bits // 8} B")
        col3.metric("Ratio", f"{stats.ratio_percent:.1f}%")
        col4.metric("Bits / symbol", f"{stats.average_code_length:.3f}")

        if current["roundtrip_ok"] is not None:
            if current["roundtrip_ok"]:
                st.caption("Round trip: decoded text matches the input.")
            else:
                st.caption("Round trip: decoded text differs from the input.")

        st.markdown("### Code table")
        st.dataframe(
            code_table_frame(result.encoded.codes, result.encoded.frequencies),
            use_container_width=True,
            hide_index=True,
        )

        with st.expander("Raw statistics"):
            st.json(stats_to_dict(stats))

        col1, col2 = st.columns(2)
        with col1:
            st.download_button(
                "Download code table",
                data=format_code_table(result.encoded.codes),
                file_name="codes.txt",
            )
        with col2:
            st.download_button(
                "Download compressed payload",
                data=result.payload,
                file_name="compressed.txt",
            )
