"""
Core Module - Exceptions.

============================================================
RESPONSIBILITY
============================================================
Defines the service-wide exception base and configuration errors.

- Provides the root of the exception hierarchy
- Carries severity and context for logging
- Marks which failures are fatal at startup

============================================================
EXCEPTION HIERARCHY
============================================================
ServiceException (base)
└── ConfigurationError
    └── InvalidConfigError

Price feed errors live in price_feed.types, repository errors
in storage.repositories.exceptions.

============================================================
"""

from enum import Enum
from datetime import datetime, timezone
from typing import Any, Dict, Optional


# ============================================================
# SEVERITY LEVELS
# ============================================================

class Severity(Enum):
    """Exception severity levels for logging."""

    LOW = "low"
    """Minor issue, informational."""

    MEDIUM = "medium"
    """Moderate issue, requires attention."""

    HIGH = "high"
    """Serious issue, service cannot run correctly."""


# ============================================================
# BASE EXCEPTION
# ============================================================

class ServiceException(Exception):
    """
    Base exception for all service errors.

    All exceptions carry:
    - severity: for log level decisions
    - context: for debugging
    - recoverable: for error handling decisions
    - timestamp: when the error occurred
    """

    default_severity: Severity = Severity.MEDIUM
    default_recoverable: bool = True

    def __init__(
        self,
        message: str,
        severity: Optional[Severity] = None,
        context: Optional[Dict[str, Any]] = None,
        recoverable: Optional[bool] = None,
    ):
        super().__init__(message)

        self.message = message
        self.severity = severity or self.default_severity
        self.context = context or {}
        self.recoverable = recoverable if recoverable is not None else self.default_recoverable
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize exception for logging."""
        return {
            "type": type(self).__name__,
            "message": self.message,
            "severity": self.severity.value,
            "recoverable": self.recoverable,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


# ============================================================
# CONFIGURATION ERRORS
# ============================================================

class ConfigurationError(ServiceException):
    """Error in configuration."""

    default_severity = Severity.HIGH
    default_recoverable = False

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        actual_value: Optional[Any] = None,
        **kwargs,
    ):
        context = kwargs.pop("context", {})

        if config_key:
            context["config_key"] = config_key
        if actual_value is not None:
            context["actual_value"] = str(actual_value)[:100]

        super().__init__(message, context=context, **kwargs)


class InvalidConfigError(ConfigurationError):
    """Configuration value cannot be used."""

    def __init__(self, config_key: str, actual_value: Any, reason: str):
        super().__init__(
            f"Invalid value for {config_key}: {reason}",
            config_key=config_key,
            actual_value=actual_value,
        )
