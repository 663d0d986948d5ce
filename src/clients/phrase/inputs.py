from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

from core.errors import ValidationError


def normalize_project_id(project_id: str) -> str:
    pid = (project_id or "").strip()
    if not pid:
        raise ValidationError("project_id must be non-empty")
    return pid


def normalize_locale_id(locale_id: str) -> str:
    lid = (locale_id or "").strip()
    if not lid:
        raise ValidationError("locale_id must be non-empty")
    return lid


def normalize_upload_file(file_path: str | Path) -> Path:
    p = Path(file_path)
    if not p.is_file():
        raise ValidationError(f"Not a file: {file_path}")
    return p


def _field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def form_fields(params: Mapping[str, Any]) -> Dict[str, str]:
    # Flatten params into multipart/query fields; None means "not set"
    out: Dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            for sub_key, sub_value in value.items():
                if sub_value is not None:
                    out[f"{key}[{sub_key}]"] = _field_value(sub_value)
        else:
            out[key] = _field_value(value)
    return out
