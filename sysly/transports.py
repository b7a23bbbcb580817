# sysly/transports.py
"""Transports that deliver formatted syslog lines."""

import logging
import socket
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from .errors import TransportSetupError

logger = logging.getLogger(__name__)

# Traditional syslog UDP endpoint
LOCAL_SYSLOG_ADDRESS = ('127.0.0.1', 514)


class Transport(ABC):
    """Abstract base class for transports.

    A transport owns a single socket and is not safe for unsynchronized use
    from several threads.
    """

    sock: Optional[socket.socket] = None

    @abstractmethod
    def send(self, line: str) -> None:
        """Send one formatted line. Socket errors propagate unchanged."""
        pass

    def close(self) -> None:
        """Close the underlying socket."""
        if self.sock:
            self.sock.close()
            self.sock = None
            logger.debug(f"{type(self).__name__} closed")

    @property
    def closed(self) -> bool:
        return self.sock is None

    def __enter__(self) -> 'Transport':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class UDPTransport(Transport):
    """Send each line as one datagram to a fixed peer."""

    def __init__(self, address: Tuple[str, int]):
        host, port = address
        # getaddrinfo wraps out of range ports instead of rejecting them
        if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 65535:
            logger.error(f"UDP transport setup failed: invalid port {port!r}")
            raise TransportSetupError(f"invalid port for {host}: {port!r}")

        try:
            family, _, _, _, peer = socket.getaddrinfo(
                host, port, type=socket.SOCK_DGRAM
            )[0]
            sock = socket.socket(family, socket.SOCK_DGRAM)
        except OSError as e:
            logger.error(f"UDP transport setup failed for {host}:{port}: {e}")
            raise TransportSetupError(f"cannot resolve {host}:{port}: {e}") from e

        wildcard = '::' if family == socket.AF_INET6 else '0.0.0.0'
        try:
            sock.bind((wildcard, 0))
        except OSError as e:
            sock.close()
            logger.error(f"UDP transport bind failed: {e}")
            raise TransportSetupError(f"error binding to local addr: {e}") from e

        self.sock = sock
        self.peer = peer
        logger.info(f"UDP transport initialized: {sock.getsockname()} -> {host}:{port}")

    @classmethod
    def local(cls) -> 'UDPTransport':
        """Target the standard syslog port on the IPv4 loopback."""
        return cls(LOCAL_SYSLOG_ADDRESS)

    def send(self, line: str) -> None:
        """Send the line as a single datagram."""
        if self.sock is None:
            raise OSError("transport is closed")
        self.sock.sendto(line.encode('utf-8'), self.peer)


class UnixStreamTransport(Transport):
    """Write lines to a connected Unix domain stream socket."""

    def __init__(self, path: str):
        self.path = str(path)
        try:
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        except (AttributeError, OSError) as e:
            logger.error(f"Unix socket unavailable: {e}")
            raise TransportSetupError(f"unix sockets unavailable: {e}") from e

        try:
            sock.connect(self.path)
        except OSError as e:
            sock.close()
            logger.error(f"Unix transport connection failed: {self.path}: {e}")
            raise TransportSetupError(f"failed to connect to socket {self.path}: {e}") from e

        self.sock = sock
        logger.info(f"Unix transport connected: {self.path}")

    def send(self, line: str) -> None:
        """Write the whole line to the stream."""
        if self.sock is None:
            raise OSError("transport is closed")
        self.sock.sendall(line.encode('utf-8'))
