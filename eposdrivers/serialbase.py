# -*- Mode: Python; coding: utf-8 -*-
# vi:si:et:sw=4:sts=4:ts=4

#
# Eposdrivers
# Copyright (C) 2026 Eposdrivers developers
# All rights reserved
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 59 Temple Place - Suite 330, Boston, MA 02111-1307,
# USA.
#
"""
Serial port access and parsing of the serial line configuration.
"""

from collections import namedtuple
import logging

from serial import (Serial, EIGHTBITS, PARITY_NONE, PARITY_ODD, PARITY_EVEN,
                    STOPBITS_ONE, STOPBITS_TWO)
from zope.interface import implementer

from eposdrivers.exceptions import ConfigError
from eposdrivers.interfaces import ISerialPort, IPortFactory
from eposdrivers.translation import eposdrivers_gettext

_ = eposdrivers_gettext

log = logging.getLogger('eposdrivers.serial')

# Defaults that work with most 80mm thermal printers exposed as an USB
# virtual serial port
DEFAULT_PORT = 'COM1'
DEFAULT_BAUDRATE = 115200
DEFAULT_BYTESIZE = EIGHTBITS
DEFAULT_PARITY = PARITY_NONE
DEFAULT_STOPBITS = STOPBITS_ONE

_PARITIES = {
    'N': PARITY_NONE,
    'O': PARITY_ODD,
    'E': PARITY_EVEN,
}

SerialSettings = namedtuple('SerialSettings',
                            ['port', 'baudrate', 'bytesize', 'parity',
                             'stopbits'])


def _parse_int(value, default):
    # Only ascii digits with an optional sign, "9_600" is not a number
    digits = value[1:] if value[:1] in ('+', '-') else value
    if not (digits.isascii() and digits.isdigit()):
        return default
    return int(value)


def parse_serial_config(config):
    """ Parses a serial configuration string.

    The format is the port name followed by optional key=value pairs, all
    separated by commas, e.g.::

        COM5,baud=9600,databits=8,parity=E,stopbits=2

    Unknown keys and tokens without '=' are ignored. Values that can't be
    understood leave the default in place.

    @param config:   the configuration string
    @type config:    str
    @returns:        the parsed settings
    @rtype:          L{SerialSettings}
    """
    if not config:
        raise ConfigError(_("The serial configuration is empty"))

    parts = config.split(',')
    port = parts[0].strip() or DEFAULT_PORT
    baudrate = DEFAULT_BAUDRATE
    bytesize = DEFAULT_BYTESIZE
    parity = DEFAULT_PARITY
    stopbits = DEFAULT_STOPBITS

    for part in parts[1:]:
        if '=' not in part:
            continue
        key, value = part.split('=', 1)
        key = key.strip().lower()
        value = value.strip()
        if key == 'baud':
            baudrate = _parse_int(value, baudrate)
        elif key == 'databits':
            bytesize = _parse_int(value, bytesize)
        elif key == 'parity':
            parity = _PARITIES.get(value.upper(), parity)
        elif key == 'stopbits':
            stopbits = STOPBITS_TWO if value == '2' else STOPBITS_ONE

    return SerialSettings(port, baudrate, bytesize, parity, stopbits)


@implementer(ISerialPort)
class VirtualPort:
    """ A port that keeps everything written to it in memory. """

    def __init__(self, settings=None):
        self.settings = settings
        self.written = []
        self.is_open = True

    def write(self, data):
        self.written.append(bytes(data))
        return len(data)

    def close(self):
        self.is_open = False

    def getvalue(self):
        return b''.join(self.written)


@implementer(ISerialPort)
class SerialPort(Serial):

    def __init__(self, device, baudrate=DEFAULT_BAUDRATE,
                 bytesize=DEFAULT_BYTESIZE, parity=DEFAULT_PARITY,
                 stopbits=DEFAULT_STOPBITS, write_timeout=None):
        # Writes block until the device consumes the data unless
        # write_timeout is given
        Serial.__init__(self, device, baudrate=baudrate, bytesize=bytesize,
                        parity=parity, stopbits=stopbits,
                        write_timeout=write_timeout)
        self.dtr = True
        self.reset_input_buffer()
        self.reset_output_buffer()

    def close(self):
        if self.is_open:
            # Flush whatever is pending to write, since Serial.close() will
            # close it *immediately*, losing what was pending to write.
            try:
                self.flush()
            finally:
                Serial.close(self)


@implementer(IPortFactory)
class SerialPortFactory:

    def __init__(self, write_timeout=None):
        self.write_timeout = write_timeout

    def open_port(self, port, baudrate, bytesize, parity, stopbits):
        log.debug("Opening %s (%d %d%s%d)" % (port, baudrate, bytesize,
                                              parity, stopbits))
        return SerialPort(port, baudrate=baudrate, bytesize=bytesize,
                          parity=parity, stopbits=stopbits,
                          write_timeout=self.write_timeout)


@implementer(IPortFactory)
class VirtualPortFactory:
    """ Hands out L{VirtualPort}s, useful when there is no printer around.
    Every port opened is kept in C{ports}.
    """

    def __init__(self):
        self.ports = []

    def open_port(self, port, baudrate, bytesize, parity, stopbits):
        virtual = VirtualPort(SerialSettings(port, baudrate, bytesize,
                                             parity, stopbits))
        self.ports.append(virtual)
        return virtual
