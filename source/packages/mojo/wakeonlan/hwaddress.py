"""
.. module:: hwaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for parsing and formatting hardware (MAC) addresses.

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

from mojo.wakeonlan.constants import CHARSET_HEX_DIGITS, HWADDR_DELIMITERS, HWADDR_LENGTH
from mojo.wakeonlan.exceptions import MalformedAddressError


def parse_mac_address(candidate: str) -> bytes:
    """
        Parses a hardware address string such as '00:22:44:66:88:AA' or '00-22-44-66-88-aa'
        into its 6 octets.  The character found in the first separator position sets the
        delimiter for the whole string.

        :param candidate: The hardware address string to parse.

        :returns: The 6 octet hardware address.

        :raises MalformedAddressError: If the candidate is not a well formed hardware address.
    """
    if not candidate:
        raise MalformedAddressError("Malformed MAC address, the address was empty.", candidate)

    if len(candidate) < 3 or candidate[2] not in HWADDR_DELIMITERS:
        errmsg = f"Malformed MAC address, expected ':' or '-' octet delimiters. candidate={candidate!r}"
        raise MalformedAddressError(errmsg, candidate)

    delimiter = candidate[2]

    octet_tokens = candidate.split(delimiter)
    if len(octet_tokens) != HWADDR_LENGTH:
        errmsg = f"Malformed MAC address, expected {HWADDR_LENGTH} octets but found {len(octet_tokens)}. candidate={candidate!r}"
        raise MalformedAddressError(errmsg, candidate)

    octets = []
    for token in octet_tokens:
        if len(token) != 2:
            errmsg = f"Malformed MAC address, octet {token!r} is not 2 characters long. candidate={candidate!r}"
            raise MalformedAddressError(errmsg, candidate)

        for tch in token:
            if tch not in CHARSET_HEX_DIGITS:
                errmsg = f"Malformed MAC address, octet {token!r} is not hexadecimal. candidate={candidate!r}"
                raise MalformedAddressError(errmsg, candidate)

        octets.append(int(token, base=16))

    return bytes(octets)


def format_mac_address(hwaddr: bytes, delimiter: str=":") -> str:
    """
        Formats a 6 octet hardware address as an upper case string.

        :param hwaddr: The hardware address to format.
        :param delimiter: The delimiter to place between the octets.

        :returns: The formatted hardware address.

        :raises MalformedAddressError: If the hardware address is not 6 octets long.
    """
    if len(hwaddr) != HWADDR_LENGTH:
        errmsg = f"Malformed MAC address, expected {HWADDR_LENGTH} octets but found {len(hwaddr)}."
        raise MalformedAddressError(errmsg, hwaddr)

    mac_str = delimiter.join([ "%02X" % octet for octet in hwaddr ])

    return mac_str
