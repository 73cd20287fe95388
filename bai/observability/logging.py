"""Structured logging configuration using structlog.

Provides JSON logging for production and console logging for development.
Policy keys often carry endpoint URIs, so a redaction processor masks
credentials before anything is rendered.
"""

import re
import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.types import EventDict, WrappedLogger

# Key names whose values are never logged
SENSITIVE_KEYS: frozenset[str] = frozenset({
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "authorization",
    "credential",
    "credentials",
    "private_key",
    "access_token",
    "refresh_token",
})

# user:password@ in endpoint URIs (ftp://user:pw@host, jms://...)
URI_CREDENTIALS_PATTERN = re.compile(r"(?P<scheme>[a-zA-Z][\w+.-]*://)[^/@\s:]+:[^/@\s]+@")
# password=... query parameters (Camel endpoint options)
URI_PASSWORD_PARAM_PATTERN = re.compile(r"(?i)(password|passphrase|secret)=[^&\s]+")


class CredentialRedactor:
    """Processor that masks credentials in log events.

    Two tiers:
    1. Key-name lookup via frozenset for known sensitive keys
    2. Regex patterns on string values for credentials embedded in URIs
    """

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        """Redact credentials from event dictionary."""
        return cast(EventDict, self._redact_dict(event_dict))

    def _redact_dict(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        """Recursively redact credentials from a dictionary."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            elif isinstance(value, dict):
                result[key] = self._redact_dict(value)
            elif isinstance(value, str):
                result[key] = self._redact_string(value)
            elif isinstance(value, (list, tuple)):
                result[key] = [
                    self._redact_string(item) if isinstance(item, str) else item
                    for item in value
                ]
            else:
                result[key] = value

        return result

    def _redact_string(self, value: str) -> str:
        """Mask URI userinfo and password options."""
        value = URI_CREDENTIALS_PATTERN.sub(r"\g<scheme>[REDACTED]@", value)
        value = URI_PASSWORD_PARAM_PATTERN.sub(r"\1=[REDACTED]", value)
        return value


def setup_logging(
    level: str = "INFO",
    format: str = "json",
    redact_credentials: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format - "json" for production, "console" for development
        redact_credentials: Whether to mask credentials in logs
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if redact_credentials:
        processors.append(CredentialRedactor())

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    level_map = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    level_num = level_map.get(level.upper(), 20)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance bound to the given name.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        A bound structlog logger
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
