import pytest

from ocr_md_utils.errors import ValidationError
from ocr_md_utils.validation import ALLOWED_MEDIA_TYPES, ensure_allowed, is_allowed_media_type


@pytest.mark.parametrize("media_type", ALLOWED_MEDIA_TYPES)
def test_allowed_types_pass(media_type):
    assert is_allowed_media_type(media_type)


@pytest.mark.parametrize(
    "media_type", ["text/plain", "application/zip", "image/svg+xml", "", None, "APPLICATION/PDF"]
)
def test_other_types_rejected(media_type):
    assert not is_allowed_media_type(media_type)


def test_ensure_allowed_raises_validation_error():
    with pytest.raises(ValidationError) as exc:
        ensure_allowed("text/plain")
    assert exc.value.status_code == 400
    assert "PDF or image" in exc.value.message
