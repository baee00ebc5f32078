"""
Structured logging utilities for the registration library.

Logging is built on structlog. Output is rendered for the console in
development and as JSON lines everywhere else, mirroring the configuration
used by the services that embed this library.

Usage:
    from user_registration.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG")
    logger = get_logger("registration")
    logger.info("User registration initiated", email_domain="example.com")
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

import structlog

from ..config import get_config


class LogCategory(Enum):
    """Log categories for routing and filtering."""
    APPLICATION = "application"
    SECURITY = "security"
    AUDIT = "audit"
    STORAGE = "storage"
    EXTERNAL_SERVICE = "external_service"


class SecurityEventType(Enum):
    """Security event types raised by input validation."""
    XSS_ATTEMPT = "xss_attempt"


_configured = False


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[str, int, None] = None,
                      json_output: Optional[bool] = None,
                      force: bool = False,
                      config_name: Optional[str] = None) -> None:
    """
    Configure structlog for structured logging.

    Args:
        level: Minimum log level name or number (default: ``LOG_LEVEL`` of
            the active configuration)
        json_output: Render JSON lines instead of console output (default:
            ``LOG_JSON`` of the active configuration)
        force: Reconfigure even if logging was already configured
        config_name: Configuration environment to read defaults from
    """
    global _configured
    if _configured and not force:
        return

    cfg = get_config(config_name)
    if level is None:
        level = cfg.LOG_LEVEL
    if json_output is None:
        json_output = cfg.LOG_JSON

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    if json_output:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Pretty console output for development
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False)
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=not cfg.TESTING,
    )
    _configured = True


def get_logger(name: str, **initial_values: Any):
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name, **initial_values)


def log_security_event(event_type: SecurityEventType, description: str,
                       severity: str = "medium", **details: Any) -> None:
    """
    Log a security-relevant event such as a rejected injection attempt.

    String values in ``details`` are truncated to 100 characters.
    """
    logger = get_logger("security")
    safe_details = {
        key: value[:100] if isinstance(value, str) else value
        for key, value in details.items()
    }
    logger.warning(
        description,
        category=LogCategory.SECURITY.value,
        event_type=event_type.value,
        severity=severity,
        **safe_details
    )
