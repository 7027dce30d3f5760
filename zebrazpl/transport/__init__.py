from .ftp import FTPReply, ZebraFTPClient
from .network import apply_netmask, find_local_address, local_ipv4_interfaces, port_argument

__all__ = [
    "apply_netmask",
    "find_local_address",
    "FTPReply",
    "local_ipv4_interfaces",
    "port_argument",
    "ZebraFTPClient",
]
