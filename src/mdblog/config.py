"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "mdblog"
    posts_dir:     str  = Field(default="posts",    description="Directory of Markdown posts")
    host:          str  = Field(default="0.0.0.0",  description="Bind address for the dev server")
    port:          int  = Field(default=8080, ge=1, le=65535, description="Listening port")
    parser_config: str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    index_limit:   int  = Field(default=4, ge=1,    description="Posts shown on the home page")
    log_level:     str  = Field(default="INFO",     description="Logging level name")
    debug:         bool = False


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then PORT, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

    if port := os.getenv("PORT"):
        data["port"] = port

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
