"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The `wol` command line entry point.

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

from typing import List, Optional

import argparse
import logging

from mojo.wakeonlan.exceptions import DeliveryFailureError, MalformedAddressError
from mojo.wakeonlan.hwaddress import parse_mac_address
from mojo.wakeonlan.magicpacket import IpProtocol, send_magic_packet


logger = logging.getLogger()


def create_argument_parser() -> argparse.ArgumentParser:

    parser = argparse.ArgumentParser(
        prog="wol",
        description="Wake a computer on the local network by broadcasting a Wake-on-LAN magic packet.")

    parser.add_argument("mac", metavar="MAC",
        help="the MAC address of the remote system, for example 00:22:44:66:88:AA")

    proto_group = parser.add_mutually_exclusive_group()
    proto_group.add_argument("-4", "--ipv4", dest="protocol", action="store_const", const=IpProtocol.IPV4,
        help="broadcast the magic packet over IPv4 (default)")
    proto_group.add_argument("-6", "--ipv6", dest="protocol", action="store_const", const=IpProtocol.IPV6,
        help="send the magic packet to the IPv6 all-nodes address")
    parser.set_defaults(protocol=IpProtocol.IPV4)

    parser.add_argument("-i", "--interface", dest="ifname", default=None,
        help="the network interface to send the magic packet out of")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
        help="log socket level details")

    return parser


def main(argv: Optional[List[str]] = None) -> int:

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(message)s")

    exit_code = 0

    try:
        hwaddr = parse_mac_address(args.mac)
        send_magic_packet(hwaddr, protocol=args.protocol, ifname=args.ifname)
    except MalformedAddressError as addr_err:
        logger.error("Error during parsing of MAC address: %s", addr_err)
        exit_code = 1
    except DeliveryFailureError as dlv_err:
        logger.error("Error during sending: %s", dlv_err)
        exit_code = 1

    return exit_code
