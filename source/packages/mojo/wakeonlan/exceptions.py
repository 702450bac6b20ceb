"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised when parsing hardware addresses or
               when sending a Wake-on-LAN magic packet.

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


class HardwareAddressError(ValueError):
    """
        This error is raised when a hardware address is not exactly 6 bytes or when
        hardware address text cannot be parsed.
    """


class WakeOnLanError(RuntimeError):
    """
        This error is the base error for failures that occur while sending a magic packet.
    """


class BindError(WakeOnLanError):
    """
        This error is raised when the local datagram socket could not be created or bound.
    """


class ConfigurationError(WakeOnLanError):
    """
        This error is raised when broadcast permission could not be enabled on the socket.
    """


class ConnectError(WakeOnLanError):
    """
        This error is raised when the socket could not be associated with the destination.
    """


class SendError(WakeOnLanError):
    """
        This error is raised when the send operation failed or when fewer bytes were
        written than the length of the payload.
    """
    def __init__(self, message, sent=None, expected=None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.sent = sent
        self.expected = expected
        return
