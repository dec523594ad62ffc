"""
Trạng thái của luồng upload → OCR trên một phiên Streamlit.

    IDLE ──select──▶ FILE_SELECTED ──begin──▶ PROCESSING ──▶ SUCCESS | FAILED
      ▲                                                          │
      └───────────────────────── reset ◀─────────────────────────┘

Chọn file mới từ SUCCESS/FAILED quay lại FILE_SELECTED. Chỉ một lần
xử lý chạy tại một thời điểm.
"""
import enum
import logging
from typing import Callable, Optional

from ocr_md_utils.schemas import OCRResult, UploadCandidate
from ocr_md_utils.validation import ensure_allowed

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred while processing the file"


class FlowState(enum.Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


class InvalidTransition(Exception):
    pass


class ProcessFlow:
    def __init__(self):
        self._state = FlowState.IDLE
        self._file: Optional[UploadCandidate] = None
        self._result: Optional[OCRResult] = None
        self._error: Optional[str] = None
        self._ticket = 0

    @property
    def state(self) -> FlowState:
        return self._state

    @property
    def file(self) -> Optional[UploadCandidate]:
        return self._file

    @property
    def result(self) -> Optional[OCRResult]:
        return self._result

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def can_process(self) -> bool:
        return self._state is FlowState.FILE_SELECTED

    @property
    def is_processing(self) -> bool:
        return self._state is FlowState.PROCESSING

    def select_file(self, candidate: UploadCandidate) -> None:
        if self._state is FlowState.PROCESSING:
            raise InvalidTransition("cannot select a file while processing")
        ensure_allowed(candidate.media_type)
        self._file = candidate
        self._result = None
        self._error = None
        self._state = FlowState.FILE_SELECTED

    def begin(self) -> int:
        if self._state is not FlowState.FILE_SELECTED:
            raise InvalidTransition(f"cannot process from {self._state.value}")
        self._ticket += 1
        self._state = FlowState.PROCESSING
        return self._ticket

    def _is_current(self, ticket: int) -> bool:
        if self._state is FlowState.PROCESSING and ticket == self._ticket:
            return True
        logger.info("Dropping outcome of abandoned request #%s", ticket)
        return False

    def complete(self, ticket: int, result: OCRResult) -> bool:
        if not self._is_current(ticket):
            return False
        self._result = result
        self._state = FlowState.SUCCESS
        return True

    def fail(self, ticket: int, message: Optional[str]) -> bool:
        if not self._is_current(ticket):
            return False
        self._error = message or GENERIC_ERROR
        self._state = FlowState.FAILED
        return True

    def reset(self) -> None:
        # vẫn tăng ticket để bỏ qua request đang chạy (nếu có)
        self._ticket += 1
        self._file = None
        self._result = None
        self._error = None
        self._state = FlowState.IDLE

    def process(self, submit: Callable[[UploadCandidate], OCRResult]) -> FlowState:
        ticket = self.begin()
        try:
            result = submit(self._file)
        except Exception as e:
            logger.error("Error processing file: %s", e)
            self.fail(ticket, str(e))
        else:
            self.complete(ticket, result)
        return self._state
