"""
Injection pattern detection for free-text form fields.

This is a coarse denylist, not a sanitizer: values matching any pattern are
rejected outright and never cleaned.
"""

import re
from typing import Any, List, Pattern

from ..utils.logging import SecurityEventType, log_security_event


class SecurityPatterns:
    """
    XSS detection used by the identity and email validators.
    """

    # HTML tags, javascript: scheme, inline event handlers
    XSS_PATTERNS: List[Pattern[str]] = [
        re.compile(r"<[^>]*>"),
        re.compile(r"javascript:", re.IGNORECASE),
        re.compile(r"on\w+\s*=", re.IGNORECASE),
    ]

    @classmethod
    def detect_xss(cls, value: Any) -> bool:
        """
        Detect potential XSS patterns.

        Args:
            value: Input string to check

        Returns:
            True if XSS patterns detected
        """
        if not isinstance(value, str):
            return False

        for pattern in cls.XSS_PATTERNS:
            if pattern.search(value):
                return True

        return False


def contains_xss(value: Any, field: str = None) -> bool:
    """Check ``value`` for XSS patterns, logging a security event on a hit."""
    if not SecurityPatterns.detect_xss(value):
        return False

    log_security_event(
        SecurityEventType.XSS_ATTEMPT,
        "XSS attempt detected",
        field=field,
        input_value=value,
    )
    return True
