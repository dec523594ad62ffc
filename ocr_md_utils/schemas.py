from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResultEntry(BaseModel):
    """Kết quả OCR của một file; backend có thể gửi thêm trường khác (images, ...)."""
    model_config = ConfigDict(extra="allow")

    md_content: str


class OCRResult(BaseModel):
    """
    Dữ liệu OCR backend trả về. `results` là dict theo tên file do backend đặt,
    không phải record cố định.
    """
    model_config = ConfigDict(extra="allow")

    backend: str
    version: str
    results: Dict[str, ResultEntry]

    @field_validator("results")
    @classmethod
    def _non_empty_names(cls, value):
        if any(not name for name in value):
            raise ValueError("result filenames must be non-empty")
        return value


class ProxyEnvelope(BaseModel):
    """Response thành công của POST /api/ocr (tên trường camelCase trên wire)."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    data: OCRResult
    filename: str
    file_size: int = Field(alias="fileSize", ge=0)
    processed_at: str = Field(alias="processedAt")


class ErrorEnvelope(BaseModel):
    error: str
    details: Optional[str] = None


class UploadCandidate(BaseModel):
    """File người dùng chọn, giữ trong bộ nhớ cho tới khi reset hoặc chọn file khác."""
    model_config = ConfigDict(frozen=True)

    name: str
    media_type: str
    content: bytes = b""

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_upload(cls, uploaded) -> "UploadCandidate":
        # Streamlit UploadedFile: .name, .type, .getvalue()
        return cls(
            name=uploaded.name,
            media_type=uploaded.type or "application/octet-stream",
            content=uploaded.getvalue(),
        )
