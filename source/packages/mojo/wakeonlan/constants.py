"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants used when building and sending Wake-on-LAN magic packets.

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

import re

# The limited broadcast address, received by every host on the local segment
DEFAULT_ADDR = "255.255.255.255"

# The Discard port, usually 0, 7 (Echo) or 9 (Discard)
DEFAULT_PORT = 9

BIND_ADDR = "0.0.0.0"
BIND_PORT = 0

HWADDR_LENGTH = 6

MAGIC_PACKET_SYNC = b"\xff" * HWADDR_LENGTH
MAGIC_PACKET_REPEAT = 16

# 6 + 6 * 16 = 102
MAGIC_PACKET_LENGTH = len(MAGIC_PACKET_SYNC) + HWADDR_LENGTH * MAGIC_PACKET_REPEAT

MAX_PORT = 65535

ENVIRONMENT_VARIABLE_PREFIX = "MOJO_WOL"

# Octets are decimal without leading zeros, "010" would be read as octal by inet_aton
REGEX_IPV4_COMPONENTS = re.compile(r"^(0|[1-9][0-9]{0,2})\.(0|[1-9][0-9]{0,2})\.(0|[1-9][0-9]{0,2})\.(0|[1-9][0-9]{0,2})$")

# Colon or hyphen separated octets, the separator must be used consistently
REGEX_HWADDR_OCTETS = re.compile(
    r"^([0-9a-fA-F]{2})([:-])([0-9a-fA-F]{2})\2([0-9a-fA-F]{2})\2([0-9a-fA-F]{2})\2([0-9a-fA-F]{2})\2([0-9a-fA-F]{2})$"
)

# Dotted groups of four hex digits, ie. 0011.2233.4455
REGEX_HWADDR_DOTTED = re.compile(r"^([0-9a-fA-F]{4})\.([0-9a-fA-F]{4})\.([0-9a-fA-F]{4})$")
