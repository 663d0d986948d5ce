import pytest

from core.errors import ValidationError
from clients.phrase.inputs import (
    form_fields,
    normalize_locale_id,
    normalize_project_id,
    normalize_upload_file,
)


def test_normalize_project_id():
    assert normalize_project_id(" abc123 ") == "abc123"
    with pytest.raises(ValidationError):
        normalize_project_id("   ")
    with pytest.raises(ValidationError):
        normalize_project_id(None)


def test_normalize_locale_id():
    assert normalize_locale_id("en-id") == "en-id"
    with pytest.raises(ValidationError):
        normalize_locale_id("")


def test_normalize_upload_file(tmp_path):
    f = tmp_path / "en.yml"
    f.write_text("x", encoding="utf-8")
    assert normalize_upload_file(str(f)) == f

    with pytest.raises(ValidationError):
        normalize_upload_file(tmp_path)


def test_form_fields():
    out = form_fields(
        {
            "file_format": "yml",
            "update_translations": True,
            "skip_unverification": False,
            "tags": ["web", "mobile"],
            "format_options": {"omit_separator_space": True, "indent": 2},
            "locale_id": None,
        }
    )
    assert out == {
        "file_format": "yml",
        "update_translations": "true",
        "skip_unverification": "false",
        "tags": "web,mobile",
        "format_options[omit_separator_space]": "true",
        "format_options[indent]": "2",
    }
