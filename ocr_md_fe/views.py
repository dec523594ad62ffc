# ocr_md_fe/views.py
import json

import streamlit as st
import streamlit.components.v1 as components

from ocr_md_utils.schemas import OCRResult, UploadCandidate
from ocr_md_utils.utils import format_file_size
from .renderer import RESULT_CSS, build_view, copy_button_html, download_bytes


def show_file_card(candidate: UploadCandidate):
    icon = "📄" if candidate.media_type == "application/pdf" else "🖼️"
    st.markdown(
        f"{icon} **{candidate.name}**  \n"
        f"<small>{format_file_size(candidate.size)}</small>",
        unsafe_allow_html=True,
    )


def show_result(result: OCRResult):
    view = build_view(result)

    st.markdown(RESULT_CSS, unsafe_allow_html=True)
    st.subheader("OCR Results")
    st.caption(view.header)

    for idx, entry in enumerate(view.entries, 1):
        with st.container(border=True):
            c1, c2, c3 = st.columns([6, 1, 1])
            with c1:
                st.markdown(f"#### {entry.filename}")
            with c2:
                components.html(copy_button_html(entry.raw), height=40)
            with c3:
                st.download_button(
                    "Download",
                    data=download_bytes(entry.raw),
                    file_name=entry.download_name,
                    mime="text/markdown",
                    key=f"dl_md_{idx}",
                )

            st.markdown(entry.html, unsafe_allow_html=True)

            with st.expander("View Raw Markdown"):
                st.code(entry.raw, language="markdown")


def show_envelope(envelope: dict):
    """Hiển thị nguyên JSON envelope cho trang API demo."""
    c1, c2 = st.columns([6, 1])
    with c1:
        st.subheader("API Response")
    with c2:
        components.html(copy_button_html(json.dumps(envelope, indent=2, ensure_ascii=False)), height=40)

    if envelope.get("success"):
        st.success(f"Processed {envelope.get('filename')} at {envelope.get('processedAt')}")
    else:
        st.error(envelope.get("error", "Unknown error"))
    st.json(envelope)
