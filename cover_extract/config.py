from __future__ import annotations

from typing import List, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from cover_extract.models import PREVIEW_MAX
from cover_extract.sources.files import MAX_UPLOAD_BYTES, SUPPORTED_TYPES
from cover_extract.sources.web import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


class Files(BaseModel):
    max_bytes: int = MAX_UPLOAD_BYTES
    allowed_types: List[str] = Field(default_factory=lambda: list(SUPPORTED_TYPES))


class Fetch(BaseModel):
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


class Output(BaseModel):
    preview_chars: int = PREVIEW_MAX
    indent: int = 2


class Logging(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Config(BaseModel):
    version: int = 1
    files: Files = Field(default_factory=Files)
    fetch: Fetch = Field(default_factory=Fetch)
    output: Output = Field(default_factory=Output)
    logging: Logging = Field(default_factory=Logging)


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config must be a YAML mapping: {path}")

    try:
        cfg = Config(**raw)
    except ValidationError as e:
        raise ValueError(f"Invalid config {path}: {e}") from e

    if cfg.files.max_bytes <= 0:
        raise ValueError(f"files.max_bytes must be positive (got {cfg.files.max_bytes})")
    if not 0 < cfg.output.preview_chars <= PREVIEW_MAX:
        raise ValueError(f"output.preview_chars must be in 1..{PREVIEW_MAX} (got {cfg.output.preview_chars})")
    if cfg.fetch.timeout <= 0:
        raise ValueError(f"fetch.timeout must be positive (got {cfg.fetch.timeout})")

    return cfg
