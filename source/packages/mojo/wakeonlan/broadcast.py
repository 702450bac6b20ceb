"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains the functions for sending a Wake-on-LAN magic packet as a
               broadcast UDP datagram.

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

from typing import Optional, Tuple, Union

import logging
import socket

from mojo.wakeonlan.constants import BIND_ADDR, BIND_PORT, DEFAULT_ADDR, DEFAULT_PORT
from mojo.wakeonlan.destination import Destination
from mojo.wakeonlan.exceptions import BindError, ConfigurationError, ConnectError, SendError
from mojo.wakeonlan.hardwareaddress import HardwareAddress, parse_hardware_address
from mojo.wakeonlan.magicpacket import build_magic_packet
from mojo.wakeonlan.resolution import is_ipv4_address


logger = logging.getLogger()


def create_broadcast_socket(bind_addr: str = BIND_ADDR, bind_port: int = BIND_PORT) -> socket.socket:
    """
        Create an IPv4 datagram socket that is bound to the specified local address and port
        and that is permitted to send to broadcast addresses.

        :param bind_addr: The local address to bind the socket to. The default is all addresses.
        :param bind_port: The local port to bind the socket to. The default lets the OS pick
                          an ephemeral port.

        :returns: The bound, broadcast enabled socket.  The caller owns the socket and must close it.

        :raises BindError: When the socket could not be created or bound.
        :raises ConfigurationError: When broadcast permission could not be enabled.
    """

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as os_err:
        logger.debug("Unable to create datagram socket. error=%s", os_err)
        raise BindError("Unable to create datagram socket: {}".format(os_err)) from os_err

    try:
        sock.bind((bind_addr, bind_port))
    except OSError as os_err:
        sock.close()
        logger.debug("Unable to bind datagram socket to %s:%d. error=%s", bind_addr, bind_port, os_err)
        raise BindError("Unable to bind datagram socket to {}:{}: {}".format(bind_addr, bind_port, os_err)) from os_err

    # The networking stack rejects datagrams sent to a broadcast address unless
    # SO_BROADCAST is set on the sending socket.
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
    except OSError as os_err:
        sock.close()
        logger.debug("Unable to enable broadcast on datagram socket. error=%s", os_err)
        raise ConfigurationError("Unable to enable broadcast on datagram socket: {}".format(os_err)) from os_err

    return sock


def send_datagram(payload: bytes, destination: Union[Destination, Tuple[str, int]]):
    """
        Sends the payload to the destination as a single UDP datagram.  There is no
        acknowledgement of delivery.

        :param payload: The bytes to send.
        :param destination: The (address, port) the datagram is sent to.

        :raises BindError: When the socket could not be created or bound.
        :raises ConfigurationError: When broadcast permission could not be enabled.
        :raises ConnectError: When the socket could not be associated with the destination.
        :raises SendError: When the send failed or not all of the payload was written.
    """
    address, port = destination
    expected = len(payload)

    logger.debug("Sending %d byte datagram to %s:%s", expected, address, port)

    sock = create_broadcast_socket()
    try:
        # connect treats an empty string as INADDR_ANY and resolves host names through DNS
        if not isinstance(address, str) or not is_ipv4_address(address):
            logger.debug("Refusing to connect datagram socket to %r:%s", address, port)
            raise ConnectError("Unable to connect to {!r}:{}: not an IPv4 address".format(address, port))

        # OverflowError is raised for a port outside of 0-65535
        try:
            sock.connect((address, port))
        except (OSError, OverflowError) as conn_err:
            logger.debug("Unable to connect datagram socket to %s:%s. error=%s", address, port, conn_err)
            raise ConnectError("Unable to connect to {}:{}: {}".format(address, port, conn_err)) from conn_err

        try:
            sent = sock.send(payload)
        except OSError as os_err:
            logger.debug("Unable to send datagram to %s:%s. error=%s", address, port, os_err)
            raise SendError("Unable to send to {}:{}: {}".format(address, port, os_err), sent=0, expected=expected) from os_err

        if sent != expected:
            errmsg = "Short send to {}:{}, sent {} of {} bytes".format(address, port, sent, expected)
            logger.debug(errmsg)
            raise SendError(errmsg, sent=sent, expected=expected)
    finally:
        sock.close()

    return


def wake_on_lan(mac: Union[str, bytes, HardwareAddress], ip: Optional[str] = None, port: Optional[int] = None) -> Destination:
    """
        Send a Wake-on-LAN magic packet over UDP.

        The packet is sent from a socket bound to `0.0.0.0:0` to the specified `ip` and
        `port`, or by default to `255.255.255.255` on port `9`.

        :param mac: The hardware address of the interface to wake, as text, 6 raw bytes
                    or a :class:`HardwareAddress`.
        :param ip: The IPv4 address to send the packet to.
        :param port: The UDP port to send the packet to.

        :returns: The destination the packet was sent to.
    """
    hwaddr = parse_hardware_address(mac)

    if ip is None:
        ip = DEFAULT_ADDR
    if port is None:
        port = DEFAULT_PORT

    destination = Destination(ip, port)

    packet = build_magic_packet(hwaddr)
    send_datagram(packet, destination)

    logger.debug("Sent magic packet for %s to %s", hwaddr, destination)

    return destination
