"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for finding the broadcast address of a local
               network interface.

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

from typing import List, Optional, Union

import netifaces

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.destination import Destination
from mojo.wakeonlan.resolution import compute_ipv4_broadcast


def get_interface_names() -> List[str]:
    """
        Gets the names of the network interfaces on the local machine.
    """
    iface_name_list = [ iface for iface in netifaces.interfaces() ]
    return iface_name_list


def get_ipv4_broadcast_address(ifname: str) -> Union[str, None]:
    """
        Get the broadcast address of the first IPv4 address associated with the specified
        interface name.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The IPv4 broadcast address of the interface or None
    """
    bcast = None

    address_info = netifaces.ifaddresses(ifname)
    if address_info is not None and netifaces.AF_INET in address_info:
        addr_info = address_info[netifaces.AF_INET][0]
        if "broadcast" in addr_info:
            bcast = addr_info["broadcast"]
        elif "addr" in addr_info and "netmask" in addr_info:
            bcast = compute_ipv4_broadcast(addr_info["addr"], addr_info["netmask"])

    return bcast


def resolve_destination(ip: Optional[str] = None, port: Optional[int] = None, ifname: Optional[str] = None) -> Destination:
    """
        Resolves the destination for a magic packet.  An explicit 'ip' is used as given,
        an 'ifname' is resolved to the broadcast address of the subnet the interface is
        attached to, otherwise the limited broadcast address is used.

        :param ip: The IPv4 address to send the packet to.
        :param port: The UDP port to send the packet to.
        :param ifname: The name of the local interface whose subnet should be woken.

        :returns: The validated :class:`Destination`.

        :raises SemanticError: When both 'ip' and 'ifname' are specified.
        :raises ValueError: When the interface is unknown or has no IPv4 broadcast address.
    """

    if ip is not None and ifname is not None:
        errmsg = "The 'ip' and 'ifname' parameters are mutually exclusive. ip={} ifname={}".format(ip, ifname)
        raise SemanticError(errmsg)

    if ifname is not None:
        if ifname not in get_interface_names():
            errmsg = "Unknown network interface. ifname={}".format(ifname)
            raise ValueError(errmsg)

        ip = get_ipv4_broadcast_address(ifname)
        if ip is None:
            errmsg = "The network interface has no IPv4 broadcast address. ifname={}".format(ifname)
            raise ValueError(errmsg)

    return Destination.create(ip, port)
