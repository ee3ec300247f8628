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
ESC/POS thermal printer connected to a (virtual) serial port.

Every operation opens the port, sends its commands and closes the port
again, so the session never keeps a connection between calls. A session is
not thread safe, callers must not use the same printer from two threads at
the same time.
"""

from contextlib import contextmanager
import logging
import time

from serial import SerialException
from zope.interface import implementer

from eposdrivers.escpos import HW_INIT, PAPER_FULL_CUT, CD_KICK_2
from eposdrivers.exceptions import (EmptyPayloadError, TransportOpenError,
                                    TransportWriteError)
from eposdrivers.interfaces import IRasterPrinter
from eposdrivers.serialbase import SerialPortFactory, parse_serial_config
from eposdrivers.transformers import get_transformer
from eposdrivers.translation import eposdrivers_gettext

_ = eposdrivers_gettext

log = logging.getLogger('eposdrivers.printer')

#: Paper width of 80mm printers, in dots
DEFAULT_PAPER_WIDTH = 576

#: Seconds to wait after sending a job, so the printer can process it
#: before the port gets closed
DEFAULT_SETTLE_TIME = 1.0

#: The maximum number of rows of a single raster command
MAX_RASTER_ROWS = 1024


@implementer(IRasterPrinter)
class SerialPrinter:
    """ A thermal printer connected to a serial port.

    @param serial_config:        the port and its line parameters, e.g.
                                 'COM5,baud=9600,parity=E,stopbits=2'
    @param paper_width:          the printable width, in dots, used to
                                 center images
    @param margin_bottom:        blank rows added after each page
    @param cut_command:          sent after each page to cut the paper
    @param cash_drawer_command:  sent to open the cash drawer
    @param transformer:          an L{IImageTransformer} or a function applied
                                 to each image before printing
    @param settle_time:          seconds to wait after sending data
    @param port_factory:         an L{IPortFactory} used to open the port
    """

    def __init__(self, serial_config, paper_width=DEFAULT_PAPER_WIDTH,
                 margin_bottom=0, cut_command=PAPER_FULL_CUT,
                 cash_drawer_command=CD_KICK_2, transformer=None,
                 settle_time=DEFAULT_SETTLE_TIME, port_factory=None):
        self._serial_config = serial_config
        self._paper_width = paper_width
        self._margin_bottom = margin_bottom
        self._cut_command = bytes(cut_command)
        self._cash_drawer_command = bytes(cash_drawer_command)
        self._transformer = get_transformer(transformer)
        self._settle_time = settle_time
        self._port_factory = port_factory or SerialPortFactory()

    def __repr__(self):
        return ('<SerialPrinter serial_config=%r paper_width=%d '
                'margin_bottom=%d>' % (self.serial_config, self.paper_width,
                                       self.margin_bottom))

    # The configuration can't be changed once the printer is created

    @property
    def serial_config(self):
        return self._serial_config

    @property
    def paper_width(self):
        return self._paper_width

    @property
    def margin_bottom(self):
        return self._margin_bottom

    @property
    def cut_command(self):
        return self._cut_command

    @property
    def cash_drawer_command(self):
        return self._cash_drawer_command

    @property
    def transformer(self):
        return self._transformer

    @property
    def settle_time(self):
        return self._settle_time

    @property
    def port_factory(self):
        return self._port_factory

    #
    # Connection handling
    #

    def open(self):
        """ Opens the printer port. The caller must close the returned port.

        @returns:   an object providing L{ISerialPort}
        """
        settings = parse_serial_config(self.serial_config)
        try:
            port = self.port_factory.open_port(*settings)
        except (SerialException, OSError, ValueError) as e:
            raise TransportOpenError(
                _("Could not open the printer port %s: %s")
                % (settings.port, e)) from e
        log.info("Opened printer port %s" % (settings.port, ))
        return port

    def reset(self):
        """ Opens the printer port and initializes the printer. The caller
        must close the returned port.

        @returns:   an object providing L{ISerialPort}
        """
        port = self.open()
        try:
            self._write(port, HW_INIT, 'reset')
        except TransportWriteError:
            self._close(port, failing=True)
            raise
        return port

    def _write(self, port, data, what):
        log.debug(">>> %r (%d bytes)" % (data, len(data)))
        try:
            port.write(data)
        except (SerialException, OSError) as e:
            raise TransportWriteError(
                _("Could not send the %s command to the printer: %s")
                % (what, e)) from e

    def _settle(self):
        if self.settle_time > 0:
            time.sleep(self.settle_time)

    def _close(self, port, failing=False):
        """ Closes the port. When failing is True another error is already
        on its way to the caller, and a close error must not replace it.
        """
        try:
            port.close()
        except (SerialException, OSError) as e:
            if failing:
                log.debug("Could not close the printer port: %r" % (e, ))
                return
            raise TransportWriteError(
                _("Could not close the printer port: %s") % (e, )) from e
        log.debug("Closed printer port")

    @contextmanager
    def _connection(self, reset=False):
        port = self.reset() if reset else self.open()
        try:
            yield port
        except BaseException:
            self._close(port, failing=True)
            raise
        self._close(port)

    #
    # IRasterPrinter
    #

    def print_raw(self, data):
        with self._connection() as port:
            if not data:
                raise EmptyPayloadError(_("There is no data to print"))
            # The whole payload goes in a single write
            self._write(port, data, 'raw')
            self._settle()

    def print_raster_image(self, image):
        image = self.transformer.transform(image)
        if image is None:
            log.debug("Transformer discarded the image, nothing to print")
            return

        with self._connection(reset=True) as port:
            for page in image.cut_pages():
                page.auto_margin_left(self.paper_width)
                page.add_margin_bottom(self.margin_bottom)
                self._write(port, page.to_escpos_raster_command(MAX_RASTER_ROWS),
                            'raster image')
                self._write(port, self.cut_command, 'paper cut')
                self._settle()

    def open_cash_box(self):
        with self._connection(reset=True) as port:
            self._write(port, self.cash_drawer_command, 'cash drawer')
