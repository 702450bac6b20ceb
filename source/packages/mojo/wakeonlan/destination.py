"""
.. module:: destination
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`Destination` type which is the IPv4 address and UDP port
               a magic packet is sent to.

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

from typing import NamedTuple, Optional

from mojo.wakeonlan.constants import DEFAULT_ADDR, DEFAULT_PORT, MAX_PORT
from mojo.wakeonlan.resolution import is_ipv4_address


class Destination(NamedTuple):
    address: str
    port: int

    @classmethod
    def create(cls, address: Optional[str] = None, port: Optional[int] = None) -> "Destination":
        """
            Creates a validated :class:`Destination`, missing values are filled in with
            the limited broadcast address and the Discard port.

            :raises ValueError: When the address is not an IPv4 address or the port is out of range.
        """
        if address is None:
            address = DEFAULT_ADDR
        if port is None:
            port = DEFAULT_PORT

        if not is_ipv4_address(address):
            errmsg = "The destination address must be an IPv4 address. address={!r}".format(address)
            raise ValueError(errmsg)

        if port < 0 or port > MAX_PORT:
            errmsg = "The destination port must be between 0 and {}. port={}".format(MAX_PORT, port)
            raise ValueError(errmsg)

        return cls(address, port)

    def __str__(self) -> str:
        return "{}:{}".format(self.address, self.port)
