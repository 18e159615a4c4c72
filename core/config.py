# =============================================================================
# core/config.py  -  Runtime Settings
# =============================================================================
#
# Settings come from environment variables.  The entry points (main.py,
# tools/mcp_server.py) call load_dotenv() first, so a local .env file
# works the same as exported variables.
#
#   ITINERARY_MODEL       LiteLlm model string
#   ITINERARY_MAX_TOKENS  max output tokens for one itinerary
#   HOST / PORT           where the HTTP server listens
#
# Provider API keys (ANTHROPIC_API_KEY, OPENROUTER_API_KEY, ...) are NOT
# read here.  LiteLlm picks them up from the environment on its own.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MODEL = "anthropic/claude-sonnet-4-5-20250929"
DEFAULT_MAX_TOKENS = 4096
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the planner."""

    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read Settings from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ

    return Settings(
        model=environ.get("ITINERARY_MODEL") or DEFAULT_MODEL,
        max_tokens=_int_setting(environ, "ITINERARY_MAX_TOKENS", DEFAULT_MAX_TOKENS),
        host=environ.get("HOST") or DEFAULT_HOST,
        port=_int_setting(environ, "PORT", DEFAULT_PORT),
    )
