"""
Các lỗi của OCR proxy. Mỗi lỗi mang sẵn HTTP status và tự chuyển
thành error envelope `{"error": ..., "details": ...}`.
"""
from typing import Optional

from .schemas import ErrorEnvelope


class ProxyError(Exception):
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_envelope(self) -> ErrorEnvelope:
        return ErrorEnvelope(error=self.message, details=self.details)


class ValidationError(ProxyError):
    """Thiếu file hoặc định dạng không hợp lệ."""
    status_code = 400


class UpstreamError(ProxyError):
    """OCR backend trả về status khác 2xx."""
    status_code = 500

    def __init__(self, upstream_status: int, upstream_reason: str):
        super().__init__(f"OCR processing failed: {upstream_status} {upstream_reason}")
        self.upstream_status = upstream_status
        self.upstream_reason = upstream_reason


class InternalError(ProxyError):
    """Lỗi mạng hoặc response không đọc được."""
    status_code = 500

    def __init__(self, details: Optional[str] = None):
        super().__init__(
            "Internal server error occurred while processing the file",
            details=details,
        )
