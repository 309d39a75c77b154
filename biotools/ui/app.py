import logging
from typing import Any, Optional

import streamlit as st

from biotools.ui.logic import AppLogic
from biotools.constants.constants import *
from biotools.settings import settings

logging.basicConfig(level=settings.log_level, format="%(levelname)s:%(name)s:%(message)s", force=True)
logger = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title=UI_PAGE_TITLE, page_icon="🧬", layout="wide")

    st.title(f"🧬 {UI_PAGE_TITLE}")

    _initialize_session_state()

    single_tab, batch_tab = st.tabs(["Single sequence", "FASTA batch"])
    with single_tab:
        _render_single_sequence()
    with batch_tab:
        _render_batch()


def _initialize_session_state() -> None:
    if "app_logic" not in st.session_state:
        st.session_state.app_logic = AppLogic()
    if "batch_result" not in st.session_state:
        st.session_state.batch_result = None


def _render_single_sequence() -> None:
    app_logic = st.session_state.app_logic
    tools = app_logic.list_tools()

    tool = st.selectbox(
        "Choose a biological tool to use",
        tools,
        format_func=lambda info: f"{info.name} - {info.description}",
    )

    sequence = st.text_area(
        "Sequence", height=UI_TEXTAREA_HEIGHT, placeholder="ATCGATCGATCG...", key="single_sequence"
    )

    if st.button("Run", type="primary", key="run_single"):
        result = app_logic.run_tool(sequence, tool.identifier)
        if result.success:
            st.success(f"{tool.name} completed")
            st.code(result.result, language=None)
        else:
            st.error(result.error or UNKNOWN_ERROR)


def _render_batch() -> None:
    app_logic = st.session_state.app_logic
    operations = app_logic.list_batch_operations()

    operation = st.selectbox(
        "Select Processing Tool",
        operations,
        format_func=lambda info: info.name,
        key="batch_operation",
    )

    uploaded_file = st.file_uploader(
        "Upload FASTA file",
        type=["fasta", "fa", "txt"],
        help="Upload a FASTA file or paste sequences directly",
    )
    fasta_text = st.text_area(
        "FASTA Content", height=UI_TEXTAREA_HEIGHT, placeholder=UI_FASTA_PLACEHOLDER, key="batch_text"
    )

    content = _get_fasta_from_input(uploaded_file, fasta_text)
    st.caption(f"{content.count(FASTA_HEADER_PREFIX)} sequences entered")

    if st.button("Start Batch Processing", type="primary", key="run_batch"):
        with st.spinner("Processing sequences..."):
            st.session_state.batch_result = app_logic.run_batch(content, operation.identifier)

    _render_batch_result()


def _get_fasta_from_input(uploaded_file: Optional[Any], fasta_text: str) -> str:
    if uploaded_file:
        return uploaded_file.read().decode("utf-8")
    return fasta_text or ""


def _render_batch_result() -> None:
    batch_result = st.session_state.batch_result
    if batch_result is None:
        return

    if not batch_result.success:
        st.error(f"Processing failed: {batch_result.error or UNKNOWN_ERROR}")
        return

    st.success(f"Successfully processed {batch_result.response.success_count} sequences")
    st.markdown(batch_result.report)

    if batch_result.fasta_output:
        st.download_button(
            "Download results (FASTA)",
            data=batch_result.fasta_output,
            file_name=f"{batch_result.operation.value}.fasta",
            mime="text/plain",
        )
    else:
        st.download_button(
            "Download report (Markdown)",
            data=batch_result.report,
            file_name=f"{batch_result.operation.value}.md",
            mime="text/markdown",
        )

    if st.button("Clear Results", type="secondary"):
        st.session_state.batch_result = None
        st.rerun()


if __name__ == "__main__":
    main()
