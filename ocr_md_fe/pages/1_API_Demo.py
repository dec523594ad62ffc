# ocr_md_fe/pages/1_API_Demo.py
import requests
import streamlit as st
from dotenv import load_dotenv

from ocr_md_utils.schemas import UploadCandidate
from ocr_md_utils.validation import ALLOWED_EXTENSIONS
from ocr_md_fe.ocr_gateway import OCRGateway
from ocr_md_fe.views import show_envelope, show_file_card

load_dotenv()

st.set_page_config(layout="wide", page_title="OCR API Demo", page_icon="🧪")

st.session_state.setdefault("demo_envelope", None)
st.session_state.setdefault("demo_error", None)

gateway = OCRGateway()

st.title("OCR API Demo")
st.caption("Test the OCR API endpoint and see the raw JSON response")

left, right = st.columns(2)

with left:
    uploaded = st.file_uploader(
        "Chọn PDF/Ảnh", type=ALLOWED_EXTENSIONS, accept_multiple_files=False, key="demo_uploader"
    )
    if uploaded is not None:
        candidate = UploadCandidate.from_upload(uploaded)
        show_file_card(candidate)
        if st.button("Send to API", type="primary"):
            st.session_state["demo_envelope"] = None
            st.session_state["demo_error"] = None
            with st.spinner("Calling POST /api/ocr ..."):
                try:
                    st.session_state["demo_envelope"] = gateway.submit_raw(candidate)
                except (requests.exceptions.RequestException, ValueError) as e:
                    st.session_state["demo_error"] = str(e) or "An error occurred while processing the file"

    with st.expander("API usage"):
        st.code(
            f'curl -X POST {gateway.proxy_url} \\\n  -F "file=@document.pdf"',
            language="bash",
        )
        st.markdown(
            "- `200`: `{success, data, filename, fileSize, processedAt}`\n"
            "- `400` / `500`: `{error, details?}`"
        )

with right:
    if st.session_state["demo_error"]:
        st.error(st.session_state["demo_error"])
    elif st.session_state["demo_envelope"] is not None:
        show_envelope(st.session_state["demo_envelope"])
