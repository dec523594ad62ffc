import pytest

from ocr_md_utils.errors import ValidationError
from ocr_md_utils.schemas import OCRResult, UploadCandidate
from ocr_md_fe.flow import GENERIC_ERROR, FlowState, InvalidTransition, ProcessFlow


@pytest.fixture
def result(backend_payload):
    return OCRResult.model_validate(backend_payload)


@pytest.fixture
def flow():
    return ProcessFlow()


def test_starts_idle(flow):
    assert flow.state is FlowState.IDLE
    assert flow.file is None and flow.result is None and flow.error is None
    assert not flow.can_process


def test_select_file(flow, pdf_candidate):
    flow.select_file(pdf_candidate)
    assert flow.state is FlowState.FILE_SELECTED
    assert flow.file == pdf_candidate
    assert flow.can_process


def test_select_rejects_disallowed_type(flow):
    with pytest.raises(ValidationError):
        flow.select_file(UploadCandidate(name="a.txt", media_type="text/plain", content=b"x"))
    assert flow.state is FlowState.IDLE
    assert flow.file is None


def test_process_success(flow, pdf_candidate, result):
    flow.select_file(pdf_candidate)
    seen = []

    def submit(candidate):
        seen.append(candidate)
        assert flow.is_processing
        return result

    assert flow.process(submit) is FlowState.SUCCESS
    assert seen == [pdf_candidate]
    assert flow.result == result
    assert flow.error is None


def test_process_failure_keeps_message(flow, pdf_candidate):
    flow.select_file(pdf_candidate)

    def submit(candidate):
        raise RuntimeError("OCR processing failed: 502 Bad Gateway")

    assert flow.process(submit) is FlowState.FAILED
    assert flow.error == "OCR processing failed: 502 Bad Gateway"
    assert flow.result is None


def test_failure_without_message_uses_fallback(flow, pdf_candidate):
    flow.select_file(pdf_candidate)

    def submit(candidate):
        raise RuntimeError()

    flow.process(submit)
    assert flow.error == GENERIC_ERROR


def test_cannot_process_without_file(flow):
    with pytest.raises(InvalidTransition):
        flow.begin()


def test_no_second_submission_while_processing(flow, pdf_candidate):
    flow.select_file(pdf_candidate)
    flow.begin()
    assert not flow.can_process
    with pytest.raises(InvalidTransition):
        flow.begin()
    with pytest.raises(InvalidTransition):
        flow.select_file(pdf_candidate)


def test_replace_selected_file_before_processing(flow, pdf_candidate, result):
    flow.select_file(pdf_candidate)
    other = UploadCandidate(name="scan.png", media_type="image/png", content=b"\x89PNG")
    flow.select_file(other)

    assert flow.state is FlowState.FILE_SELECTED
    assert flow.file == other
    assert flow.can_process

    seen = []
    flow.process(lambda candidate: seen.append(candidate) or result)
    assert seen == [other]
    assert flow.state is FlowState.SUCCESS


@pytest.mark.parametrize("outcome", ["success", "failure"])
def test_select_after_outcome_clears_previous(flow, pdf_candidate, result, outcome):
    flow.select_file(pdf_candidate)
    ticket = flow.begin()
    if outcome == "success":
        flow.complete(ticket, result)
    else:
        flow.fail(ticket, "boom")

    other = UploadCandidate(name="scan.png", media_type="image/png", content=b"\x89PNG")
    flow.select_file(other)
    assert flow.state is FlowState.FILE_SELECTED
    assert flow.file == other
    assert flow.result is None and flow.error is None


@pytest.mark.parametrize("stage", ["idle", "selected", "processing", "success", "failed"])
def test_reset_from_any_state(flow, pdf_candidate, result, stage):
    if stage != "idle":
        flow.select_file(pdf_candidate)
    if stage in ("processing", "success", "failed"):
        ticket = flow.begin()
        if stage == "success":
            flow.complete(ticket, result)
        elif stage == "failed":
            flow.fail(ticket, "boom")

    flow.reset()
    assert flow.state is FlowState.IDLE
    assert flow.file is None and flow.result is None and flow.error is None
    assert not flow.is_processing


def test_outcome_after_reset_is_dropped(flow, pdf_candidate, result):
    flow.select_file(pdf_candidate)
    ticket = flow.begin()
    flow.reset()

    assert flow.complete(ticket, result) is False
    assert flow.state is FlowState.IDLE
    assert flow.result is None


def test_stale_outcome_does_not_touch_new_request(flow, pdf_candidate, result):
    flow.select_file(pdf_candidate)
    old = flow.begin()
    flow.reset()
    flow.select_file(pdf_candidate)
    new = flow.begin()

    assert flow.fail(old, "late failure") is False
    assert flow.is_processing
    assert flow.complete(new, result) is True
    assert flow.state is FlowState.SUCCESS
