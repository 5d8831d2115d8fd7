from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DEFAULT_BACKEND_URL = "http://localhost:8000"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


def _get_bool(*keys: str, default: bool) -> bool:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    if v.lower() in _TRUE:
        return True
    if v.lower() in _FALSE:
        return False
    raise ValueError(f"{keys[0]} must be a boolean, got {v!r}")


@dataclass(frozen=True)
class Settings:
    backend_url: str
    http_timeout: float
    clear_cart_on_rejected_order: bool
    log_level: str


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        backend_url=_get_env(
            "ARTFLOW_BACKEND_URL", "VITE_BACKEND_URL", "BACKEND_URL",
            default=DEFAULT_BACKEND_URL,
        ) or DEFAULT_BACKEND_URL,
        http_timeout=_get_float("ARTFLOW_HTTP_TIMEOUT", default=10.0),
        clear_cart_on_rejected_order=_get_bool(
            "ARTFLOW_CLEAR_CART_ON_REJECTED_ORDER", default=True
        ),
        log_level=(_get_env("ARTFLOW_LOG_LEVEL", "LOG_LEVEL", default="INFO") or "INFO").upper(),
    )
