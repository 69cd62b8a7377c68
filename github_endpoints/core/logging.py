"""Structured logging via structlog.

Hosts call `configure_structlog()` once at startup. All subsequent calls to
`structlog.get_logger()` (or `logging.getLogger()` via the stdlib bridge)
use this configuration.

Renderer selection:
  debug=True:  `ConsoleRenderer` with colours for local runs.
  debug=False: `JSONRenderer` for CI logs.

Credential redaction:
  Any event key that names a credential (token, jwt, private_key, ...) has
  its value replaced with "[REDACTED]" before rendering. Installation
  tokens and App JWTs are bearer credentials for their whole validity
  window and must not end up in build logs.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

REDACTED = "[REDACTED]"

_SENSITIVE_KEYS = frozenset(
    {"token", "jwt", "private_key", "secret", "authorization", "password"}
)


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(sensitive in lowered for sensitive in _SENSITIVE_KEYS)


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: REDACTED if _is_sensitive(str(k)) else _redact(v)
            for k, v in value.items()
        }
    return value


def redact_credentials(
    logger: logging.Logger,
    method: str,
    event_dict: dict,
) -> dict:
    """Structlog processor: redact values stored under credential-like keys."""
    for key in list(event_dict.keys()):
        if key == "event":
            continue
        if _is_sensitive(key):
            event_dict[key] = REDACTED
        else:
            event_dict[key] = _redact(event_dict[key])
    return event_dict


def configure_structlog(debug: bool = False) -> None:
    """Configure structlog for the process lifetime.

    Safe to call more than once; the last call wins.
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_credentials,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if debug else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Stdlib records (this package, httpx) go to the same stream as plain
    # lines; they do not pass through the structlog processors above.
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )
    # httpx logs every request URL at INFO; keep that to debug runs.
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
