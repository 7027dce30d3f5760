from __future__ import annotations

import ipaddress
import socket
from typing import Iterable, List, Optional, Tuple

import psutil

from ..errors import FTPError

Interface = Tuple[str, str]


def apply_netmask(address: str, netmask: str) -> str:
    masked = int(ipaddress.IPv4Address(address)) & int(ipaddress.IPv4Address(netmask))
    return str(ipaddress.IPv4Address(masked))


def port_argument(address: str, port: int) -> str:
    """PORT argument: four address octets then the port as two bytes."""
    if not 0 < port < 65536:
        raise ValueError(f"Port out of range: {port}")
    octets = str(ipaddress.IPv4Address(address)).split(".")
    return ",".join(octets + [str(port // 256), str(port % 256)])


def local_ipv4_interfaces() -> List[Interface]:
    """(address, netmask) of every IPv4 address on this host."""
    interfaces: List[Interface] = []
    for addresses in psutil.net_if_addrs().values():
        for entry in addresses:
            if entry.family == socket.AF_INET and entry.netmask:
                interfaces.append((entry.address, entry.netmask))
    return interfaces


def _ipv4_peer(peer: str) -> str:
    try:
        address = ipaddress.ip_address(peer.split("%", 1)[0])
    except ValueError:
        raise FTPError(f"Invalid peer address {peer!r}") from None
    if isinstance(address, ipaddress.IPv6Address):
        if address.ipv4_mapped is None:
            raise FTPError(f"Active FTP needs an IPv4 peer, got {peer}")
        address = address.ipv4_mapped
    return str(address)


def find_local_address(peer: str, interfaces: Optional[Iterable[Interface]] = None) -> str:
    """IPv4 address of the local interface that shares a subnet with peer."""
    peer_ipv4 = _ipv4_peer(peer)
    if interfaces is None:
        interfaces = local_ipv4_interfaces()
    for address, netmask in interfaces:
        if apply_netmask(address, netmask) == apply_netmask(peer_ipv4, netmask):
            return address
    raise FTPError(f"No local network interface shares a subnet with {peer}")
