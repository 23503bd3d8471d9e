"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the functions that build Wake-on-LAN magic packets and broadcast them
               over IPv4 or IPv6.

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

from typing import Optional, Tuple

from enum import IntEnum

import logging
import socket

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.constants import (
    HWADDR_LENGTH,
    IPV4_BROADCAST_ADDRESS,
    IPV4_WILDCARD_ADDRESS,
    IPV6_ALL_NODES_ADDRESS,
    IPV6_WILDCARD_ADDRESS,
    MAGIC_PACKET_LENGTH,
    MAGIC_REPETITIONS,
    MAGIC_SYNC_STREAM,
    WOL_PORT
)
from mojo.wakeonlan.exceptions import DeliveryFailureError, MalformedAddressError
from mojo.wakeonlan.hwaddress import format_mac_address
from mojo.wakeonlan.interfaces import get_ipv4_broadcast_address, get_ipv6_scope_id


logger = logging.getLogger()


class IpProtocol(IntEnum):
    IPV4 = 4
    IPV6 = 6


def create_magic_packet_payload(hwaddr: bytes) -> bytes:
    '[FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )'

    if len(hwaddr) != HWADDR_LENGTH:
        errmsg = f"Cannot build a magic packet, expected a {HWADDR_LENGTH} octet address but found {len(hwaddr)} octets."
        raise MalformedAddressError(errmsg, hwaddr)

    payload = MAGIC_SYNC_STREAM + bytes(hwaddr) * MAGIC_REPETITIONS

    return payload


def get_transmission_target(protocol: IpProtocol, ifname: Optional[str] = None) -> Tuple[socket.AddressFamily, Tuple, Tuple]:
    """
        Determines the socket family, the local wildcard bind address and the destination
        address that a magic packet should be sent with for the specified protocol.

        :param protocol: The IP protocol version to send the magic packet with.
        :param ifname: An optional interface name.  For IPv4 the directed broadcast address of
                       the interface is used as the destination, for IPv6 the all-nodes
                       destination is scoped to the interface.

        :returns: A tuple of (family, bind_address, target_address)
    """

    family = None
    bind_addr = None
    target = None

    if protocol == IpProtocol.IPV4:
        family = socket.AF_INET
        bind_addr = (IPV4_WILDCARD_ADDRESS, 0)

        broadcast_addr = IPV4_BROADCAST_ADDRESS
        if ifname is not None:
            try:
                broadcast_addr = get_ipv4_broadcast_address(ifname)
            except ValueError as val_err:
                errmsg = f"Unable to lookup the broadcast address for interface. ifname={ifname} {val_err}"
                raise DeliveryFailureError(errmsg, None) from val_err

            if broadcast_addr is None:
                errmsg = f"The interface does not have an IPv4 broadcast address. ifname={ifname}"
                raise DeliveryFailureError(errmsg, None)

        target = (broadcast_addr, WOL_PORT)

    elif protocol == IpProtocol.IPV6:
        family = socket.AF_INET6
        bind_addr = (IPV6_WILDCARD_ADDRESS, 0)

        scope_id = 0
        if ifname is not None:
            try:
                scope_id = get_ipv6_scope_id(ifname)
            except (ValueError, OSError) as lookup_err:
                errmsg = f"Unable to lookup the IPv6 scope for interface. ifname={ifname} {lookup_err}"
                os_err = lookup_err if isinstance(lookup_err, OSError) else None
                raise DeliveryFailureError(errmsg, None, os_err) from lookup_err

        target = (IPV6_ALL_NODES_ADDRESS, WOL_PORT, 0, scope_id)

    else:
        errmsg = f"Unsupported IP protocol for a magic packet. protocol={protocol!r}"
        raise SemanticError(errmsg)

    return family, bind_addr, target


def send_magic_packet(hwaddr: bytes, protocol: IpProtocol = IpProtocol.IPV4, ifname: Optional[str] = None):
    """
        Broadcasts a Wake-on-LAN magic packet for the specified hardware address.  A single
        datagram is sent and there is no confirmation that the remote host woke up.

        :param hwaddr: The 6 octet hardware address of the host to wake.
        :param protocol: The IP protocol version to broadcast the magic packet with.
        :param ifname: An optional interface name to direct the magic packet out of.

        :raises DeliveryFailureError: If the magic packet could not be handed to the network stack.
    """

    payload = create_magic_packet_payload(hwaddr)

    family, bind_addr, target = get_transmission_target(protocol, ifname=ifname)

    logger.info("Sending magic packet for %s to %s port %d", format_mac_address(hwaddr), target[0], target[1])

    sock = None
    try:
        sock = socket.socket(family, socket.SOCK_DGRAM)

        # Limited broadcast destinations are refused unless SO_BROADCAST is set
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

        sock.bind(bind_addr)
        logger.debug("Magic packet socket bound to %r", sock.getsockname())

        sent = sock.sendto(payload, target)
    except OSError as os_err:
        errmsg = f"Could not deliver magic packet to {target[0]} port {target[1]}. {os_err}"
        raise DeliveryFailureError(errmsg, target, os_err) from os_err
    finally:
        if sock is not None:
            sock.close()

    if sent != MAGIC_PACKET_LENGTH:
        errmsg = f"Could not deliver magic packet to {target[0]} port {target[1]}, only sent {sent} of {MAGIC_PACKET_LENGTH} bytes."
        raise DeliveryFailureError(errmsg, target)

    return
