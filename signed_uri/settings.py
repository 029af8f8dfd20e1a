"""Codec configuration."""

from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

DEFAULT_SIGNATURE_PARAM = "_signature"
DEFAULT_EXPIRES_PARAM = "_expires"


@dataclass(slots=True, frozen=True)
class CodecSettings:
    signature_param: str = DEFAULT_SIGNATURE_PARAM
    expires_param: str = DEFAULT_EXPIRES_PARAM

    def __post_init__(self) -> None:
        if not self.signature_param or not self.expires_param:
            raise ValueError("Reserved parameter names cannot be empty")
        if self.signature_param == self.expires_param:
            raise ValueError("Signature and expiry parameters must use different names")


def settings_from_env() -> CodecSettings:
    return CodecSettings(
        signature_param=os.environ.get("SIGNED_URL_SIGNATURE_PARAM", DEFAULT_SIGNATURE_PARAM),
        expires_param=os.environ.get("SIGNED_URL_EXPIRES_PARAM", DEFAULT_EXPIRES_PARAM),
    )


def load_settings(path: str | pathlib.Path) -> CodecSettings:
    """Read reserved parameter names from a YAML mapping."""
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}")
    known = {key: data[key] for key in ("signature_param", "expires_param") if key in data}
    if not known:
        logger.warning("No parameter names in %s; using defaults", path)
    return CodecSettings(**known)
