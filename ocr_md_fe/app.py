# ocr_md_fe/app.py
import streamlit as st
from dotenv import load_dotenv

from ocr_md_utils import utils
from ocr_md_utils.errors import ValidationError
from ocr_md_utils.schemas import UploadCandidate
from ocr_md_utils.validation import ALLOWED_EXTENSIONS
from ocr_md_fe.flow import FlowState, ProcessFlow
from ocr_md_fe.ocr_gateway import OCRGateway
from ocr_md_fe.views import show_file_card, show_result

# Nạp biến môi trường từ file .env
load_dotenv()
utils.setup_logging()

# ============================================================
# Cấu hình trang
# ============================================================
st.set_page_config(page_title="OCR Document Processor", page_icon="📄")

# ============================================================
# Khởi tạo session_state mặc định
# ============================================================
st.session_state.setdefault("flow", ProcessFlow())
st.session_state.setdefault("uploader_key", 0)   # đổi key để xoá file trong uploader

flow: ProcessFlow = st.session_state["flow"]
gateway = OCRGateway()


def reset_flow():
    flow.reset()
    st.session_state["uploader_key"] += 1


# ============================================================
# Chọn file
# ============================================================
st.title("OCR Document Processor")
st.caption("Upload a PDF or image file to extract and render its contents")

uploaded = st.file_uploader(
    "Drag & drop a file here",
    type=ALLOWED_EXTENSIONS,
    accept_multiple_files=False,
    disabled=flow.is_processing,
    help="Supports PDF, JPEG, PNG, WebP, GIF, BMP, TIFF",
    key=f"uploader_{st.session_state['uploader_key']}",
)

if uploaded is None:
    if flow.file is not None and not flow.is_processing:
        flow.reset()
else:
    candidate = UploadCandidate.from_upload(uploaded)
    if candidate != flow.file:
        try:
            flow.select_file(candidate)
        except ValidationError as e:
            st.error(f"{e.message} (JPEG, PNG, WebP, GIF, BMP, TIFF)")

if flow.file is not None:
    show_file_card(flow.file)

# ============================================================
# Thực hiện OCR
# ============================================================
if flow.can_process:
    if st.button("Process File", type="primary"):
        with st.spinner("Processing your document with OCR..."):
            flow.process(gateway.submit_for_display)
        st.rerun()

# ============================================================
# Hiển thị kết quả / lỗi
# ============================================================
if flow.state is FlowState.FAILED:
    st.error(f"**Processing Error**\n\n{flow.error}")
    st.button("Try Again", on_click=reset_flow)

elif flow.state is FlowState.SUCCESS:
    show_result(flow.result)
    st.button("Process Another File", on_click=reset_flow)
