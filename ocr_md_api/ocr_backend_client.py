# ocr_md_api/ocr_backend_client.py
import logging
from typing import Optional

import requests

from ocr_md_utils import utils
from ocr_md_utils.errors import InternalError, UpstreamError
from ocr_md_utils.schemas import OCRResult

logger = logging.getLogger(__name__)

# Endpoint `/file_parse` của OCR backend bên ngoài (ghi đè bằng OCR_BACKEND_URL)
DEFAULT_BACKEND_URL = "https://ocr_backend.futurixai.com/file_parse"

# Bộ tham số cố định gửi kèm mỗi file
BACKEND_PARAMS = {
    "return_middle_json": "false",
    "return_model_output": "false",
    "return_md": "true",
    "return_images": "true",
    "end_page_id": "99999",
    "parse_method": "auto",
    "start_page_id": "0",
    "lang_list": "en",
    "output_dir": "./output",
    "server_url": "string",
    "return_content_list": "false",
    "backend": "vlm-vllm-async-engine",
    "table_enable": "true",
    "response_format_zip": "false",
    "formula_enable": "true",
}


def call_ocr(
    raw_bytes: bytes,
    filename: str,
    content_type: str,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> OCRResult:
    """
    Send one file to the OCR backend and return its parsed JSON:
      {
        "backend": ...,
        "version": ...,
        "results": {"<filename>": {"md_content": ...}, ...}
      }
    Raises UpstreamError on a non-2xx status, InternalError on network
    or parse failures. No retry.
    """
    url = url or utils.get_env("OCR_BACKEND_URL", DEFAULT_BACKEND_URL)
    if timeout is None:
        # None = không đặt timeout, để mặc định của requests
        timeout = utils.get_float_env("OCR_BACKEND_TIMEOUT")

    files = {"files": (filename, raw_bytes, content_type)}

    file_hash = utils.compute_file_hash(raw_bytes)
    logger.info(
        f"Forwarding file: {filename}, size: {len(raw_bytes)} bytes, hash: {file_hash}, type: {content_type}"
    )

    try:
        resp = requests.post(
            url,
            files=files,
            data=BACKEND_PARAMS,
            headers={"accept": "application/json"},
            timeout=timeout,
        )
    except requests.exceptions.RequestException as e:
        logger.error("Cannot reach OCR backend: %s", e)
        raise InternalError(details=str(e)) from e

    # chỉ 2xx là thành công; 3xx không được requests follow cũng là lỗi
    if not 200 <= resp.status_code < 300:
        logger.error("OCR backend error: %s %s", resp.status_code, resp.reason)
        raise UpstreamError(resp.status_code, resp.reason or "")

    try:
        return OCRResult.model_validate(resp.json())
    except ValueError as e:
        # requests JSONDecodeError và pydantic ValidationError đều là ValueError
        logger.error("OCR backend returned invalid JSON: %s", e)
        raise InternalError(details=str(e)) from e
