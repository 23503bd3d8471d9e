"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised when parsing hardware addresses or
               delivering Wake-on-LAN magic packets.

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


class WakeOnLanError(RuntimeError):
    """
        This error is the base error for failures to wake a remote host.
    """


class MalformedAddressError(WakeOnLanError, ValueError):
    """
        This error is raised when a candidate string does not decode to a 6 octet
        hardware (MAC) address.
    """
    def __init__(self, message, candidate, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.candidate = candidate
        return


class DeliveryFailureError(WakeOnLanError):
    """
        This error is raised when a magic packet could not be handed to the network
        stack.  The underlying system error is kept in `os_error`.
    """
    def __init__(self, message, target: Optional[Tuple], os_error: Optional[OSError]=None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.target = target
        self.os_error = os_error
        return
