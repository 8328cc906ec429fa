"""
Core Module Package.

This package contains the infrastructure components
that all other modules depend on.

Components:
- clock: Injectable time abstraction
- config: Environment-driven configuration
- exceptions: Service exception base
- logging_setup: Process-wide logging
"""

from .clock import ClockProtocol, SystemClock, MockClock
from .config import AppConfig
from .exceptions import ServiceException, ConfigurationError
from .logging_setup import setup_logging

__all__ = [
    "ClockProtocol",
    "SystemClock",
    "MockClock",
    "AppConfig",
    "ServiceException",
    "ConfigurationError",
    "setup_logging",
]
