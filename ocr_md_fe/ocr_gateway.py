# ocr_md_fe/ocr_gateway.py
import logging
from typing import Optional

import requests

from ocr_md_utils import utils
from ocr_md_utils.schemas import OCRResult, UploadCandidate

logger = logging.getLogger(__name__)

DEFAULT_PROXY_URL = "http://localhost:8000/api/ocr"


class OCRRequestError(Exception):
    """Lỗi hiển thị cho người dùng; message đã sẵn sàng để in ra UI."""


class OCRGateway:
    """
    Gửi file lên OCR proxy. Hai cách dùng chung một lần gọi mạng:
    `submit_for_display` bóc envelope thành OCRResult, `submit_raw` trả
    nguyên envelope (trang API demo).
    """

    def __init__(self, proxy_url: Optional[str] = None, timeout: Optional[float] = None):
        self.proxy_url = proxy_url or utils.get_env("OCR_PROXY_URL", DEFAULT_PROXY_URL)
        self.timeout = timeout if timeout is not None else utils.get_float_env("OCR_PROXY_TIMEOUT")

    def _post(self, candidate: UploadCandidate) -> requests.Response:
        files = {"file": (candidate.name, candidate.content, candidate.media_type)}
        try:
            return requests.post(self.proxy_url, files=files, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error("Error processing file with OCR API: %s", e)
            raise

    def submit_for_display(self, candidate: UploadCandidate) -> OCRResult:
        res = self._post(candidate)

        if not 200 <= res.status_code < 300:
            try:
                body = res.json()
            except ValueError:
                body = None
            message = body.get("error") if isinstance(body, dict) else None
            raise OCRRequestError(
                message or f"API request failed: {res.status_code} {res.reason}"
            )

        envelope = res.json()
        if not isinstance(envelope, dict):
            raise OCRRequestError("OCR processing failed")
        if not envelope.get("success"):
            raise OCRRequestError(envelope.get("error") or "OCR processing failed")

        return OCRResult.model_validate(envelope["data"])

    def submit_raw(self, candidate: UploadCandidate) -> dict:
        return self._post(candidate).json()
