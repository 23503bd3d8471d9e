"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for directing magic packets out of a specific interface.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import Union

import socket

import netifaces


def get_ipv4_broadcast_address(ifname: str) -> Union[str, None]:
    """
        Get the IPv4 directed broadcast address of the first IPv4 address associated
        with the specified interface name.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The IPv4 broadcast address of the specified interface or None

        :raises ValueError: If the interface name is not known to the system.
    """
    addr = None

    address_info = netifaces.ifaddresses(ifname)
    if address_info is not None and netifaces.AF_INET in address_info:
        addr_info = address_info[netifaces.AF_INET][0]
        addr = addr_info.get("broadcast")

    return addr


def get_ipv6_scope_id(ifname: str) -> int:
    """
        Get the scope id to attach to link-local IPv6 destinations sent out of the
        specified interface.

        :param ifname: The interface name to lookup the scope id for.

        :returns: The interface index used as the IPv6 scope id.

        :raises ValueError: If the interface name is not known to the system.
    """
    if ifname not in netifaces.interfaces():
        raise ValueError("Unknown network interface. ifname={}".format(ifname))

    scope_id = socket.if_nametoindex(ifname)

    return scope_id
