"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the 'mojo-wol' command which sends a Wake-on-LAN magic packet.

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

import logging

import click

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.broadcast import wake_on_lan
from mojo.wakeonlan.constants import DEFAULT_ADDR, DEFAULT_PORT, ENVIRONMENT_VARIABLE_PREFIX, MAX_PORT
from mojo.wakeonlan.exceptions import HardwareAddressError, WakeOnLanError
from mojo.wakeonlan.hardwareaddress import HardwareAddress
from mojo.wakeonlan.interfaces import resolve_destination
from mojo.wakeonlan.resolution import is_ipv4_address


logger = logging.getLogger()


class HardwareAddressParamType(click.ParamType):
    name = "mac"

    def convert(self, value, param, ctx):
        if isinstance(value, HardwareAddress):
            return value
        try:
            return HardwareAddress.parse(value)
        except HardwareAddressError as hwerr:
            self.fail(str(hwerr), param, ctx)


class IPv4AddressParamType(click.ParamType):
    name = "ipv4"

    def convert(self, value, param, ctx):
        if not is_ipv4_address(value):
            self.fail("{!r} is not an IPv4 address.".format(value), param, ctx)
        return value


HARDWARE_ADDRESS = HardwareAddressParamType()
IPV4_ADDRESS = IPv4AddressParamType()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("mac", type=HARDWARE_ADDRESS)
@click.option("--ip", "-i", type=IPV4_ADDRESS, default=None, envvar=ENVIRONMENT_VARIABLE_PREFIX + "_IP",
              help="Target IP address. [default: {}] For a NIC on a local subnet 192.168.10.0/24, "
                   "use the subnet's broadcast address: 192.168.10.255.".format(DEFAULT_ADDR))
@click.option("--port", "-p", type=click.IntRange(0, MAX_PORT), default=DEFAULT_PORT, show_default=True,
              envvar=ENVIRONMENT_VARIABLE_PREFIX + "_PORT",
              help="Target port; usually 0, 7 (Echo), or 9 (Discard).")
@click.option("--interface", "-I", "ifname", default=None, envvar=ENVIRONMENT_VARIABLE_PREFIX + "_INTERFACE",
              help="Send to the broadcast address of the subnet this local interface is attached to.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def main(mac, ip, port, ifname, verbose):
    """
        Send a Wake-on-LAN magic packet to the NIC with the hardware address MAC.

        Limitations: may not work outside the local network; requires hardware
        support in the destination computer; most 802.11 wireless interfaces do not
        maintain a link in low-power states and cannot receive a magic packet.
    """
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        destination = resolve_destination(ip=ip, port=port, ifname=ifname)
    except SemanticError as sem_err:
        raise click.UsageError("The --ip and --interface options cannot be used together.") from sem_err
    except ValueError as val_err:
        raise click.BadParameter(str(val_err), param_hint="'--interface'") from val_err

    try:
        wake_on_lan(mac, ip=destination.address, port=destination.port)
    except WakeOnLanError as wol_err:
        raise click.ClickException(str(wol_err)) from wol_err

    logger.info("Sent magic packet for %s to %s", mac, destination)

    return


if __name__ == "__main__":
    main()
