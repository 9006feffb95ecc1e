from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from claude_hello.schema import DEFAULT_MODEL

DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
DEFAULT_ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_MAX_TOKENS = 2024
DEFAULT_PROMPT = "MCP가 뭐야?"
DEFAULT_TIMEOUT_S = 600.0


@dataclass(frozen=True)
class Settings:
    backend: str = "anthropic"

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    anthropic_version: str = DEFAULT_ANTHROPIC_VERSION
    timeout_s: float = DEFAULT_TIMEOUT_S

    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    prompt: str = DEFAULT_PROMPT

    log_dir: Path | None = None


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    # Allow users to keep secrets in a local `.env` (not committed).
    load_dotenv(dotenv_path=dotenv_path, override=False)

    def getenv(key: str, default: str | None = None) -> str | None:
        v = os.getenv(key)
        if v is None or v == "":
            return default
        return v

    def getint(key: str, default: int) -> int:
        raw = getenv(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {raw!r}") from None

    def getfloat(key: str, default: float) -> float:
        raw = getenv(key)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError:
            raise ValueError(f"{key} must be a number, got {raw!r}") from None

    backend = (getenv("CLAUDE_HELLO_BACKEND", "anthropic") or "anthropic").strip().lower()

    max_tokens = getint("CLAUDE_HELLO_MAX_TOKENS", DEFAULT_MAX_TOKENS)
    if max_tokens <= 0:
        raise ValueError(f"CLAUDE_HELLO_MAX_TOKENS must be positive, got {max_tokens}")

    log_dir_raw = getenv("CLAUDE_HELLO_LOG_DIR")

    return Settings(
        backend=backend,
        api_key=getenv("ANTHROPIC_API_KEY", "") or "",
        base_url=getenv("ANTHROPIC_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
        anthropic_version=getenv("CLAUDE_HELLO_ANTHROPIC_VERSION", DEFAULT_ANTHROPIC_VERSION)
        or DEFAULT_ANTHROPIC_VERSION,
        timeout_s=getfloat("CLAUDE_HELLO_TIMEOUT_S", DEFAULT_TIMEOUT_S),
        model=getenv("CLAUDE_HELLO_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL,
        max_tokens=max_tokens,
        prompt=getenv("CLAUDE_HELLO_PROMPT", DEFAULT_PROMPT) or DEFAULT_PROMPT,
        log_dir=Path(log_dir_raw).resolve() if log_dir_raw else None,
    )
