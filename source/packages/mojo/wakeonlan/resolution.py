"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for validating and working with IPv4 addresses.

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

import socket
import struct

from mojo.wakeonlan.constants import REGEX_IPV4_COMPONENTS


def is_ipv4_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an ipv4 address.

        :param candidate: A string that is to be checked to see if it is a valid IPv4 address.

        :returns: A boolean indicating if an IP address is an IPv4 address
    """
    is_ipv4 = False

    # The regex will ensure that all the component characters are integer characters
    # and that we have the correct number of components.
    mobj = REGEX_IPV4_COMPONENTS.match(candidate)
    if mobj is not None:
        addr_components = [ v for v in mobj.groups() ]
        if len(addr_components) == 4:
            is_ipv4 = True
            for nc in addr_components:
                cval = int(nc)
                if cval < 0 or cval > 255:
                    is_ipv4 = False
                    break

    return is_ipv4


def ipv4_to_int(addr: str) -> int:
    """
        Converts dotted IPv4 address text into its 32-bit integer value.
    """
    packed = socket.inet_aton(addr)
    value, = struct.unpack("!I", packed)
    return value


def int_to_ipv4(value: int) -> str:
    """
        Converts a 32-bit integer value into dotted IPv4 address text.
    """
    packed = struct.pack("!I", value & 0xFFFFFFFF)
    return socket.inet_ntoa(packed)


def compute_ipv4_broadcast(addr: str, netmask: str) -> str:
    """
        Computes the directed broadcast address of the subnet that 'addr' belongs to.

        :param addr: An IPv4 address on the subnet.
        :param netmask: The dotted netmask of the subnet.

        :returns: The broadcast address of the subnet, ie. 192.168.10.255 for 192.168.10.7/255.255.255.0
    """
    addr_val = ipv4_to_int(addr)
    mask_val = ipv4_to_int(netmask)
    bcast_val = addr_val | (~mask_val & 0xFFFFFFFF)
    return int_to_ipv4(bcast_val)
