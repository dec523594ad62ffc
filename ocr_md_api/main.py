# ocr_md_api/main.py
# ------------------------------------------------------------
# FastAPI entrypoint cho OCR proxy: nhận file, chuyển tiếp tới
# OCR backend, chuẩn hoá response thành envelope.
# ------------------------------------------------------------
import logging

from dotenv import load_dotenv
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from ocr_md_utils import utils
from ocr_md_utils.errors import InternalError, ProxyError, ValidationError
from ocr_md_utils.schemas import ErrorEnvelope, ProxyEnvelope
from ocr_md_utils.validation import ensure_allowed
from . import ocr_backend_client

load_dotenv()
utils.setup_logging()
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(title="OCR‑Proxy", version="0.1.0")

# preflight từ trình duyệt (có header Origin) do middleware trả lời
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# ──────────────────── Error handlers ─────────────────────────
@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_envelope().model_dump(exclude_none=True),
    )


@app.exception_handler(RequestValidationError)
async def request_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Malformed OCR request: %s", exc.errors())
    body = ErrorEnvelope(error="Invalid request", details=str(exc.errors()))
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


# ──────────────────── Endpoints ──────────────────────────────
@app.post("/api/ocr", response_model=ProxyEnvelope, summary="Nhận file & trả envelope kết quả OCR")
async def ocr_endpoint(file: UploadFile = File(None)):
    """
    1) Nhận đúng một file upload (field `file`)
    2) Kiểm tra định dạng theo allow-list
    3) Gọi OCR backend kèm bộ tham số cố định
    4) Trả về ProxyEnvelope(success, data, filename, fileSize, processedAt)
    """
    if not file:
        raise ValidationError("No file provided")

    ensure_allowed(file.content_type)

    filename = file.filename or "upload"
    raw = await file.read()

    try:
        data = await run_in_threadpool(
            ocr_backend_client.call_ocr,
            raw,
            filename=filename,
            content_type=file.content_type,
        )
    except ProxyError:
        raise
    except Exception as e:
        logger.exception("Unexpected error while proxying %s", filename)
        raise InternalError(details=str(e)) from e

    envelope = ProxyEnvelope(
        data=data,
        filename=filename,
        file_size=len(raw),
        processed_at=utils.get_timestamp(),
    )
    return JSONResponse(content=envelope.model_dump(by_alias=True))


@app.options("/api/ocr")
async def ocr_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "ok", "timestamp": utils.get_timestamp()}


def run():
    import uvicorn

    uvicorn.run(
        app,
        host=utils.get_env("API_HOST", "0.0.0.0"),
        port=int(utils.get_env("API_PORT", "8000")),
    )
