"""Tests for the Syslog logger."""

import dataclasses
import re
import socket
from datetime import datetime, timezone

import pytest

from sysly.errors import TransportSetupError
from sysly.priority import Facility, Severity
from sysly.syslog import Syslog
from sysly.transports import UDPTransport

requires_unix = pytest.mark.skipif(
    not hasattr(socket, "AF_UNIX"), reason="unix domain sockets unavailable"
)

SEVERITY_METHODS = [
    ("emergency", Severity.EMERGENCY),
    ("alert", Severity.ALERT),
    ("critical", Severity.CRITICAL),
    ("err", Severity.ERROR),
    ("warn", Severity.WARNING),
    ("notice", Severity.NOTICE),
    ("info", Severity.INFO),
    ("debug", Severity.DEBUG),
]


def _recv(sock) -> str:
    data, _ = sock.recvfrom(65536)
    return data.decode("utf-8")


def _parse_timestamp(text: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


class TestConfiguration:
    def test_defaults(self, udp_receiver):
        _, address = udp_receiver
        with Syslog.udp(address) as log:
            assert log.facility is Facility.USER
            assert (log.host, log.app, log.pid, log.msgid) == (None, None, None, None)

    def test_setters_return_new_value_on_same_transport(self, udp_receiver):
        _, address = udp_receiver
        with Syslog.udp(address) as log:
            configured = (log.with_facility(Facility.LOCAL0)
                          .with_host("foo.local")
                          .with_app("sysly")
                          .with_pid(16)
                          .with_msgid("TCPIN"))

            assert configured is not log
            assert configured.transport is log.transport
            assert configured.facility is Facility.LOCAL0
            assert configured.host == "foo.local"
            assert configured.app == "sysly"
            assert configured.pid == "16"
            assert configured.msgid == "TCPIN"
            # the source value is untouched
            assert log.facility is Facility.USER
            assert log.host is None

    def test_frozen(self, udp_receiver):
        _, address = udp_receiver
        with Syslog.udp(address) as log:
            with pytest.raises(dataclasses.FrozenInstanceError):
                log.host = "elsewhere"

    def test_format_with_fixed_timestamp(self, udp_receiver):
        _, address = udp_receiver
        ts = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)
        with Syslog.udp(address) as log:
            log = log.with_facility(Facility.LOCAL0).with_app("sysly")
            assert log.format(Severity.INFO, "yo", ts) == "<134>1 2026-10-18T12:00:00Z - sysly - - yo"

    def test_log_with_given_timestamp(self, udp_receiver):
        recv_sock, address = udp_receiver
        ts = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)
        with Syslog.udp(address) as log:
            log.with_app("sysly").log(Severity.INFO, "yo", ts)
            line = _recv(recv_sock)
        assert line == "<14>1 2026-10-18T12:00:00Z - sysly - - yo"

    def test_local_udp(self):
        with Syslog.local_udp() as log:
            assert isinstance(log.transport, UDPTransport)
            assert log.transport.peer == ("127.0.0.1", 514)

    def test_context_manager_closes_shared_transport(self, udp_receiver):
        _, address = udp_receiver
        log = Syslog.udp(address)
        derived = log.with_app("sysly")
        with derived:
            pass
        assert log.transport.closed


class TestDatagramDelivery:
    def test_info_scenario(self, udp_receiver):
        recv_sock, address = udp_receiver
        with Syslog.udp(address) as log:
            log = log.with_facility(Facility.LOCAL0).with_app("sysly")
            before = datetime.now(timezone.utc)
            log.info("yo")
            after = datetime.now(timezone.utc)

            line = _recv(recv_sock)

        match = re.fullmatch(r"<134>1 (\S+) - sysly - - yo", line)
        assert match is not None
        stamp = _parse_timestamp(match.group(1))
        assert stamp.tzinfo is not None
        assert before.replace(microsecond=0) <= stamp <= after

        # exactly one datagram
        recv_sock.settimeout(0.2)
        with pytest.raises(socket.timeout):
            recv_sock.recvfrom(65536)

    @pytest.mark.parametrize("method,severity", SEVERITY_METHODS)
    def test_severity_methods(self, udp_receiver, method, severity):
        recv_sock, address = udp_receiver
        with Syslog.udp(address) as log:
            log = log.with_facility(Facility.DAEMON)
            getattr(log, method)("hello world")
            line = _recv(recv_sock)

        assert line.startswith(f"<{int(Facility.DAEMON) | int(severity)}>1 ")
        assert line.endswith(" - - - - hello world")

    def test_log_with_explicit_severity(self, udp_receiver, fake):
        recv_sock, address = udp_receiver
        host = fake.hostname()
        with Syslog.udp(address) as log:
            log.with_host(host).log(Severity.NOTICE, "explicit")
            line = _recv(recv_sock)

        fields = line.split(" ")
        assert fields[0] == "<13>1"
        assert fields[2:] == [host, "-", "-", "-", "explicit"]

    def test_send_error_propagates(self, udp_receiver):
        _, address = udp_receiver
        log = Syslog.udp(address)
        log.close()
        with pytest.raises(OSError):
            log.info("after close")


@requires_unix
class TestStreamDelivery:
    def test_info_over_unix_socket(self, unix_listener):
        listener, path = unix_listener
        with Syslog.unix(path) as log:
            conn, _ = listener.accept()
            with conn:
                conn.settimeout(5.0)
                log.with_facility(Facility.LOCAL0).with_app("sysly").info("yo")
                data = conn.recv(65536).decode("utf-8")

        assert re.fullmatch(r"<134>1 \S+ - sysly - - yo", data)

    def test_peer_closed_before_send(self, unix_listener):
        listener, path = unix_listener
        log = Syslog.unix(path)
        log.transport.sock.settimeout(5.0)
        try:
            conn, _ = listener.accept()
            conn.close()

            with pytest.raises(OSError):
                log.info("yo")
        finally:
            log.close()

    def test_connect_failure_is_recoverable(self, socket_dir):
        with pytest.raises(TransportSetupError):
            Syslog.unix(socket_dir + "/nothing-here.sock")
