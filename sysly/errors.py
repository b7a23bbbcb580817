# sysly/errors.py
"""Exceptions raised by sysly."""


class SyslyError(Exception):
    """Base class for sysly errors."""


class TransportSetupError(SyslyError):
    """A transport could not be bound, resolved or connected."""


class ConfigError(SyslyError):
    """Configuration could not be loaded or is invalid."""
