import socket
from types import SimpleNamespace

import pytest

from zebrazpl.errors import FTPError
from zebrazpl.transport import network
from zebrazpl.transport.network import apply_netmask, find_local_address, port_argument


def test_apply_netmask():
    assert apply_netmask("192.168.1.10", "255.255.255.0") == "192.168.1.0"
    assert apply_netmask("10.1.2.3", "255.0.0.0") == "10.0.0.0"


def test_port_argument():
    assert port_argument("192.168.1.10", 50000) == "192,168,1,10,195,80"
    assert port_argument("127.0.0.1", 21) == "127,0,0,1,0,21"
    with pytest.raises(ValueError):
        port_argument("127.0.0.1", 70000)


def test_local_ipv4_interfaces(monkeypatch):
    addresses = {
        "lo": [SimpleNamespace(family=socket.AF_INET, address="127.0.0.1", netmask="255.0.0.0")],
        "eth0": [
            SimpleNamespace(family=socket.AF_INET6, address="fe80::1", netmask="ffff:ffff:ffff:ffff::"),
            SimpleNamespace(family=socket.AF_INET, address="192.168.1.5", netmask="255.255.255.0"),
            SimpleNamespace(family=socket.AF_INET, address="169.254.0.1", netmask=None),
        ],
    }
    monkeypatch.setattr(network.psutil, "net_if_addrs", lambda: addresses)
    assert network.local_ipv4_interfaces() == [("127.0.0.1", "255.0.0.0"), ("192.168.1.5", "255.255.255.0")]


def test_find_local_address():
    interfaces = [("127.0.0.1", "255.0.0.0"), ("192.168.1.5", "255.255.255.0"), ("10.0.0.7", "255.0.0.0")]
    assert find_local_address("192.168.1.40", interfaces) == "192.168.1.5"
    assert find_local_address("10.20.30.40", interfaces) == "10.0.0.7"
    with pytest.raises(FTPError):
        find_local_address("172.16.0.1", interfaces)


def test_find_local_address_ipv6_peer():
    interfaces = [("127.0.0.1", "255.0.0.0"), ("192.168.1.5", "255.255.255.0")]
    assert find_local_address("::ffff:192.168.1.40", interfaces) == "192.168.1.5"
    with pytest.raises(FTPError):
        find_local_address("::1", interfaces)
    with pytest.raises(FTPError):
        find_local_address("fe80::1%eth0", interfaces)
    with pytest.raises(FTPError):
        find_local_address("printer.local", interfaces)
