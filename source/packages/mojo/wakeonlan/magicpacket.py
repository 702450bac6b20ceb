"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the function that builds a Wake-on-LAN magic packet.

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

from mojo.wakeonlan.constants import MAGIC_PACKET_REPEAT, MAGIC_PACKET_SYNC
from mojo.wakeonlan.hardwareaddress import HardwareAddress


def build_magic_packet(hwaddr: Union[bytes, HardwareAddress]) -> bytes:
    """
        Build a magic Wake-on-LAN packet from a 48-bit hardware address.

            [FF FF FF FF FF FF] + [hwaddr] * 16   ( len 102 bytes )

        :param hwaddr: The 6 byte hardware address of the interface to wake.

        :returns: The 102 byte magic packet payload.
    """
    packet = MAGIC_PACKET_SYNC + bytes(hwaddr) * MAGIC_PACKET_REPEAT
    return packet
