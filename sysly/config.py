# sysly/config.py
"""Configuration loader and logger factory."""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

import yaml

from .errors import ConfigError
from .priority import Facility
from .syslog import Syslog

logger = logging.getLogger(__name__)

TRANSPORT_MODES = ('udp', 'unix')


@dataclass
class SyslogConfig:
    facility: str = "user"
    host: Optional[str] = None
    app: Optional[str] = None
    pid: Optional[str] = None
    msgid: Optional[str] = None


@dataclass
class TransportConfig:
    mode: str = "udp"
    host: str = "127.0.0.1"
    port: int = 514
    socket_path: str = "/var/run/syslog-stream.sock"


@dataclass
class AppConfig:
    syslog: SyslogConfig = field(default_factory=SyslogConfig)
    transport: TransportConfig = field(default_factory=TransportConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from a YAML file, falling back to defaults."""

    default_config = {
        'syslog': {
            'facility': 'user',
            'host': None,
            'app': None,
            'pid': None,
            'msgid': None,
        },
        'transport': {
            'mode': 'udp',
            'host': '127.0.0.1',
            'port': 514,
            'socket_path': '/var/run/syslog-stream.sock',
        },
    }

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        if not isinstance(file_config, dict):
            raise ConfigError(f"{config_path}: top level must be a mapping")

        # Merge configurations
        for key in default_config:
            section = file_config.get(key)
            if section is None:
                continue
            if not isinstance(section, dict):
                raise ConfigError(f"{config_path}: '{key}' must be a mapping")
            unknown = set(section) - set(default_config[key])
            if unknown:
                raise ConfigError(
                    f"{config_path}: unknown {key} keys: {', '.join(sorted(unknown))}"
                )
            default_config[key].update(section)
        logger.debug(f"Loaded configuration from {config_path}")

    config = AppConfig(
        syslog=SyslogConfig(**default_config['syslog']),
        transport=TransportConfig(**default_config['transport']),
    )
    _normalize(config, config_path)
    return config


def _normalize(config: AppConfig, source: str) -> None:
    """Check value types, coercing the port to int and metadata to str."""
    for section, name in (('syslog', 'facility'), ('transport', 'mode'),
                          ('transport', 'host'), ('transport', 'socket_path')):
        value = getattr(getattr(config, section), name)
        if not isinstance(value, str):
            raise ConfigError(f"{source}: {section}.{name} must be a string, got {value!r}")

    port = config.transport.port
    if isinstance(port, bool):
        raise ConfigError(f"{source}: transport.port must be an integer, got {port!r}")
    try:
        port = int(port)
    except (TypeError, ValueError):
        raise ConfigError(f"{source}: transport.port must be an integer, got {port!r}") from None
    if not 0 <= port <= 65535:
        raise ConfigError(f"{source}: transport.port out of range: {port}")
    config.transport.port = port

    for name in ('host', 'app', 'pid', 'msgid'):
        value = getattr(config.syslog, name)
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            raise ConfigError(f"{source}: syslog.{name} must be a scalar, got {value!r}")
        setattr(config.syslog, name, str(value))


def create_logger(config: AppConfig) -> Syslog:
    """Build a Syslog for the configured transport and metadata.

    Raises ConfigError for bad settings and TransportSetupError when the
    transport cannot be set up.
    """
    _normalize(config, "configuration")
    mode = config.transport.mode.lower()
    if mode not in TRANSPORT_MODES:
        raise ConfigError(f"Unknown transport mode '{config.transport.mode}'")

    try:
        facility = Facility.from_name(config.syslog.facility)
    except ValueError as e:
        raise ConfigError(str(e)) from e

    if mode == 'udp':
        syslog = Syslog.udp((config.transport.host, config.transport.port))
    else:
        syslog = Syslog.unix(config.transport.socket_path)

    syslog = syslog.with_facility(facility)
    if config.syslog.host:
        syslog = syslog.with_host(config.syslog.host)
    if config.syslog.app:
        syslog = syslog.with_app(config.syslog.app)
    if config.syslog.pid:
        syslog = syslog.with_pid(config.syslog.pid)
    if config.syslog.msgid:
        syslog = syslog.with_msgid(config.syslog.msgid)
    return syslog
