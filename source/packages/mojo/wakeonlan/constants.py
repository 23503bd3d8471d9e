"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants used to build and deliver Wake-on-LAN magic packets.

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

# The discard port.  Port 7 (echo) is also seen in the wild, but we always send to 9.
WOL_PORT = 9

IPV4_BROADCAST_ADDRESS = "255.255.255.255"
IPV4_WILDCARD_ADDRESS = "0.0.0.0"

# IPv6 has no broadcast, the link-local all-nodes group reaches every host on the segment.
IPV6_ALL_NODES_ADDRESS = "ff02::1"
IPV6_WILDCARD_ADDRESS = "::"

HWADDR_LENGTH = 6
HWADDR_DELIMITERS = (":", "-")

CHARSET_HEX_DIGITS = "0123456789abcdefABCDEF"

MAGIC_SYNC_STREAM = b"\xff" * 6
MAGIC_REPETITIONS = 16
MAGIC_PACKET_LENGTH = len(MAGIC_SYNC_STREAM) + (HWADDR_LENGTH * MAGIC_REPETITIONS)
