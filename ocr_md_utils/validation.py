"""
Danh sách định dạng file được chấp nhận, dùng chung cho FE và API
để hai phía không bao giờ lệch nhau.
"""
from .errors import ValidationError

ALLOWED_MEDIA_TYPES = (
    "application/pdf",
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/webp",
    "image/gif",
    "image/bmp",
    "image/tiff",
)

# phần mở rộng cho bộ lọc file_uploader của Streamlit
ALLOWED_EXTENSIONS = ["pdf", "jpeg", "jpg", "png", "webp", "gif", "bmp", "tiff"]

INVALID_TYPE_MESSAGE = "Invalid file type. Please upload a PDF or image file."


def is_allowed_media_type(media_type) -> bool:
    return media_type in ALLOWED_MEDIA_TYPES


def ensure_allowed(media_type) -> None:
    if not is_allowed_media_type(media_type):
        raise ValidationError(INVALID_TYPE_MESSAGE)
