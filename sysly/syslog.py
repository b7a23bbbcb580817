# sysly/syslog.py
"""The Syslog logger: metadata plus an owned transport."""

from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

from .formatter import format_line
from .priority import Facility, Severity
from .transports import Transport, UDPTransport, UnixStreamTransport


@dataclass(frozen=True)
class Syslog:
    """Formats RFC 5424 lines and hands them to a single transport.

    Instances are immutable. The ``with_*`` methods return a new ``Syslog``
    bound to the same transport object, so closing any of them closes the
    transport for all. A ``Syslog`` is meant to be used from one thread at a
    time; emission blocks until the socket call returns.
    """
    transport: Transport
    facility: Facility = Facility.USER
    host: Optional[str] = None
    app: Optional[str] = None
    pid: Optional[str] = None
    msgid: Optional[str] = None

    # ==================== FACTORIES ====================

    @classmethod
    def udp(cls, address: Tuple[str, int]) -> 'Syslog':
        """Log to a syslog daemon listening for datagrams at ``address``."""
        return cls(UDPTransport(address))

    @classmethod
    def local_udp(cls) -> 'Syslog':
        """Log to 127.0.0.1:514 over UDP."""
        return cls(UDPTransport.local())

    @classmethod
    def unix(cls, path: Union[str, Path]) -> 'Syslog':
        """Log to a host-local daemon listening on a Unix stream socket."""
        return cls(UnixStreamTransport(path))

    # ==================== CONFIGURATION ====================

    def with_facility(self, facility: Facility) -> 'Syslog':
        return replace(self, facility=facility)

    def with_host(self, host: str) -> 'Syslog':
        return replace(self, host=host)

    def with_app(self, app: str) -> 'Syslog':
        return replace(self, app=app)

    def with_pid(self, pid: Union[str, int]) -> 'Syslog':
        return replace(self, pid=str(pid))

    def with_msgid(self, msgid: str) -> 'Syslog':
        return replace(self, msgid=msgid)

    # ==================== EMISSION ====================

    def format(self, severity: Severity, message: str,
               timestamp: Optional[datetime] = None) -> str:
        """Build the line this logger would send, stamped now by default."""
        if timestamp is None:
            timestamp = datetime.now().astimezone()
        return format_line(
            self.facility, severity, timestamp,
            self.host, self.app, self.pid, self.msgid, message
        )

    def log(self, severity: Severity, message: str,
            timestamp: Optional[datetime] = None) -> None:
        """Format ``message`` at ``severity`` and send it.

        The line is stamped with the current time unless ``timestamp`` is
        given. Socket errors from the transport are raised unchanged.
        """
        self.transport.send(self.format(severity, message, timestamp))

    def debug(self, message: str) -> None:
        self.log(Severity.DEBUG, message)

    def info(self, message: str) -> None:
        self.log(Severity.INFO, message)

    def notice(self, message: str) -> None:
        self.log(Severity.NOTICE, message)

    def warn(self, message: str) -> None:
        self.log(Severity.WARNING, message)

    def err(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def critical(self, message: str) -> None:
        self.log(Severity.CRITICAL, message)

    def alert(self, message: str) -> None:
        self.log(Severity.ALERT, message)

    def emergency(self, message: str) -> None:
        self.log(Severity.EMERGENCY, message)

    # ==================== LIFECYCLE ====================

    def close(self) -> None:
        """Release the transport."""
        self.transport.close()

    def __enter__(self) -> 'Syslog':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
