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
Creating printers from the configuration file
"""

import logging

from eposdrivers.configparser import EposdriversConfig
from eposdrivers.exceptions import ConfigError
from eposdrivers.printers.serialprinter import SerialPrinter
from eposdrivers.translation import eposdrivers_gettext
from eposdrivers.utils import get_obj_from_path, hex2bytes

_ = eposdrivers_gettext

log = logging.getLogger('eposdrivers.printers')

PRINTER_SECTION = 'Printer'


def _load_transformer(path):
    return get_obj_from_path(path)()


# option name: function converting the value found in the file
_OPTIONS = [
    ('paper_width', int),
    ('margin_bottom', int),
    ('settle_time', float),
    ('cut_command', hex2bytes),
    ('cash_drawer_command', hex2bytes),
    ('transformer', _load_transformer),
]


def get_serial_printer(config_file=None, section=PRINTER_SECTION, **kwargs):
    """ Creates a L{SerialPrinter} using the options of the configuration
    file. A config like this::

        [Printer]
        serial = COM3,baud=9600
        paper_width = 576
        margin_bottom = 40
        cut_command = 1d 56 00
        transformer = eposdrivers.transformers.BlankImageFilter

    Keyword arguments take precedence over the file and are passed to
    L{SerialPrinter} as they are.
    """
    config = EposdriversConfig(config_file)
    options = {}
    if 'serial_config' not in kwargs:
        options['serial_config'] = config.get_option('serial', section)

    for name, convert in _OPTIONS:
        if name in kwargs:
            continue
        try:
            value = config.get_option(name, section)
        except ConfigError:
            # Option not found, use the default
            continue
        try:
            options[name] = convert(value)
        except (ValueError, ImportError, TypeError) as e:
            raise ConfigError(_("Invalid value for %s: %r (%s)")
                              % (name, value, e)) from e

    options.update(kwargs)
    printer = SerialPrinter(**options)
    log.info("Printer created from %s: %r" % (config.filename, printer))
    return printer


def get_baudrate_values():
    """ Returns baudrate values to configure the communication speed with
    serial port.
    """
    return ['4800', '9600', '19200', '38400', '57600', '115200']
