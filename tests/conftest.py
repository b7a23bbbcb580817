"""Shared fixtures: loopback UDP receiver and Unix stream listener."""

import os
import shutil
import socket
import tempfile

import pytest
from faker import Faker


@pytest.fixture
def fake():
    return Faker()


@pytest.fixture
def udp_receiver():
    """A UDP socket bound to the loopback, returns (sock, (host, port))."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(5.0)
    try:
        yield sock, sock.getsockname()
    finally:
        sock.close()


@pytest.fixture
def socket_dir():
    # Unix socket paths are length limited, so avoid the deep tmp_path tree
    path = tempfile.mkdtemp(prefix="sysly")
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def unix_listener(socket_dir):
    """A listening Unix stream socket, returns (sock, path)."""
    path = os.path.join(socket_dir, "s.sock")
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    sock.bind(path)
    sock.listen(1)
    sock.settimeout(5.0)
    try:
        yield sock, path
    finally:
        sock.close()
