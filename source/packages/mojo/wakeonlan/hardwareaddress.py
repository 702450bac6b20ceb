"""
.. module:: hardwareaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`HardwareAddress` class which represents the 48-bit MAC
               address of a network interface.

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

from mojo.wakeonlan.constants import HWADDR_LENGTH, REGEX_HWADDR_DOTTED, REGEX_HWADDR_OCTETS
from mojo.wakeonlan.exceptions import HardwareAddressError


class HardwareAddress:
    """
        An immutable 6 byte hardware address.  Two hardware addresses are equal when
        their bytes are equal.
    """

    __slots__ = ("_octets",)

    def __init__(self, octets: Union[bytes, bytearray, memoryview]):
        if not isinstance(octets, (bytes, bytearray, memoryview)):
            errmsg = "A hardware address must be created from bytes. type={}".format(type(octets).__name__)
            raise HardwareAddressError(errmsg)

        octets = bytes(octets)
        if len(octets) != HWADDR_LENGTH:
            errmsg = "A hardware address must be exactly {} bytes. found={}".format(HWADDR_LENGTH, len(octets))
            raise HardwareAddressError(errmsg)
        object.__setattr__(self, "_octets", octets)
        return

    @classmethod
    def parse(cls, text: str) -> "HardwareAddress":
        """
            Parses hardware address text in one of the following notations:

                00:11:22:33:44:55
                00-11-22-33-44-55
                0011.2233.4455

            :param text: The hardware address text to parse.

            :returns: The :class:`HardwareAddress` for the text.

            :raises HardwareAddressError: When the text is not a hardware address.
        """
        candidate = text.strip()

        hex_digits = None

        mobj = REGEX_HWADDR_OCTETS.match(candidate)
        if mobj is not None:
            # Group 2 is the separator
            groups = mobj.groups()
            hex_digits = "".join([groups[0]] + list(groups[2:]))
        else:
            mobj = REGEX_HWADDR_DOTTED.match(candidate)
            if mobj is not None:
                hex_digits = "".join(mobj.groups())

        if hex_digits is None:
            errmsg = "Invalid hardware address text. text={!r}".format(text)
            raise HardwareAddressError(errmsg)

        return cls(bytes.fromhex(hex_digits))

    @property
    def octets(self) -> bytes:
        return self._octets

    @property
    def is_broadcast(self) -> bool:
        return self._octets == b"\xff" * HWADDR_LENGTH

    @property
    def is_null(self) -> bool:
        return self._octets == b"\x00" * HWADDR_LENGTH

    def __bytes__(self) -> bytes:
        return self._octets

    def __len__(self) -> int:
        return len(self._octets)

    def __eq__(self, other) -> bool:
        if isinstance(other, HardwareAddress):
            return self._octets == other._octets
        if isinstance(other, (bytes, bytearray)):
            return self._octets == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._octets)

    def __setattr__(self, name, value):
        raise AttributeError("HardwareAddress objects are immutable.")

    def __repr__(self) -> str:
        return "HardwareAddress('{}')".format(str(self))

    def __str__(self) -> str:
        return ":".join(["{:02X}".format(b) for b in self._octets])


def parse_hardware_address(mac: Union[str, bytes, bytearray, memoryview, HardwareAddress]) -> HardwareAddress:
    """
        Converts a hardware address given as text, raw bytes or a :class:`HardwareAddress`
        into a :class:`HardwareAddress`.
    """
    hwaddr = None

    if isinstance(mac, HardwareAddress):
        hwaddr = mac
    elif isinstance(mac, str):
        hwaddr = HardwareAddress.parse(mac)
    elif isinstance(mac, (bytes, bytearray, memoryview)):
        hwaddr = HardwareAddress(mac)
    else:
        errmsg = "Unsupported hardware address type. type={}".format(type(mac).__name__)
        raise HardwareAddressError(errmsg)

    return hwaddr
