"""Load push sources and pull targets from the project config file.

The file is YAML with a single top-level `phraseapp` mapping. Per-entry
values fall back to the top-level access token, project id and file format.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from core.errors import NotFoundError, ValidationError
from core.models import PatternSettings, Source, Target

log = logging.getLogger(__name__)


@dataclass
class ProjectConfig:
    access_token: str = ""
    project_id: str = ""
    file_format: str = ""
    sources: List[Source] = field(default_factory=list)
    targets: List[Target] = field(default_factory=list)


def load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise NotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as e:
            raise ValidationError(f"Config file is not valid YAML: {path}: {e}") from e
    return data or {}


def _entries(section: Any, key: str) -> Optional[List[Any]]:
    if not isinstance(section, dict):
        return None
    entries = section.get(key)
    if entries is None:
        return None
    if not isinstance(entries, list):
        raise ValidationError(f"'{key}' must be a list")
    return entries


def _build_settings(
    entries: List[Any],
    *,
    access_token: str,
    project_id: str,
    file_format: str,
) -> List[PatternSettings]:
    out: List[PatternSettings] = []
    for raw in entries:
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValidationError(f"Invalid entry in config: {raw!r}")

        params = dict(raw.get("params") or {})
        entry = PatternSettings(
            file=str(raw.get("file") or ""),
            project_id=str(raw.get("project_id") or project_id),
            access_token=str(raw.get("access_token") or access_token),
            file_format=str(raw.get("file_format") or ""),
            params=params,
        )

        # params.file_format wins, then the entry's, then the global one
        if not params.get("file_format"):
            fmt = entry.file_format or file_format
            if fmt:
                entry.params["file_format"] = fmt

        out.append(entry)
    return out


def parse_project_config(data: Dict[str, Any], *, token_override: str = "") -> ProjectConfig:
    root = data.get("phraseapp") if isinstance(data, dict) else None
    if not isinstance(root, dict):
        raise ValidationError("Config file has no 'phraseapp' section")

    access_token = token_override or str(root.get("access_token") or "")
    project_id = str(root.get("project_id") or "")
    file_format = str(root.get("file_format") or "")

    common = dict(access_token=access_token, project_id=project_id, file_format=file_format)

    sources_raw = _entries(root.get("push"), "sources")
    targets_raw = _entries(root.get("pull"), "targets")

    return ProjectConfig(
        access_token=access_token,
        project_id=project_id,
        file_format=file_format,
        sources=_build_settings(sources_raw or [], **common),
        targets=_build_settings(targets_raw or [], **common),
    )


def load_project_config(path: Path, *, token_override: str = "") -> ProjectConfig:
    cfg = parse_project_config(load_yaml(path), token_override=token_override)
    log.debug("Loaded %d sources and %d targets from %s", len(cfg.sources), len(cfg.targets), path)
    return cfg


def require_sources(cfg: ProjectConfig) -> List[Source]:
    if not cfg.sources:
        raise ValidationError("no sources for upload specified")
    return cfg.sources


def require_targets(cfg: ProjectConfig) -> List[Target]:
    if not cfg.targets:
        raise ValidationError("no targets for download specified")
    return cfg.targets
