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
Interfaces of the printer, its port and its image collaborators
"""

from zope.interface import Interface, Attribute

__all__ = ["ISerialPort",
           "IPortFactory",
           "IRasterImage",
           "IImageTransformer",
           "IRasterPrinter"]


class ISerialPort(Interface):
    """ An open connection to the printer. """

    def write(data):
        """ Writes the given bytes to the port.

        @param data:   the bytes to write
        @type data:    bytes
        @returns:      the number of bytes written
        """

    def close():
        """ Flushes what is pending and closes the port. """


class IPortFactory(Interface):
    """ Opens connections to a named serial port. """

    def open_port(port, baudrate, bytesize, parity, stopbits):
        """ Opens the port with the given line parameters.

        @param port:       the port name, e.g. COM1 or /dev/ttyUSB0
        @type port:        str
        @param baudrate:   the speed of the line
        @type baudrate:    int
        @param bytesize:   number of data bits
        @type bytesize:    int
        @param parity:     one of serial.PARITY_NONE, PARITY_ODD, PARITY_EVEN
        @type parity:      str
        @param stopbits:   serial.STOPBITS_ONE or STOPBITS_TWO
        @type stopbits:    int
        @returns:          an object providing L{ISerialPort}
        """


class IRasterImage(Interface):
    """ A 1-bit raster image that can be split in pages and encoded as
    printer commands.
    """

    width = Attribute("The width of the image, in dots")
    height = Attribute("The height of the image, in dots")

    def cut_pages():
        """ Splits the image at its cut positions.

        @returns:   a list of L{IRasterImage}, one for each page, in order
        """

    def auto_margin_left(paper_width):
        """ Adds a left margin so the image is centered on the paper.

        @param paper_width:   the printable width, in dots
        @type paper_width:    int
        """

    def add_margin_bottom(rows):
        """ Appends blank rows after the image.

        @param rows:   number of blank dot rows
        @type rows:    int
        """

    def to_escpos_raster_command(max_rows):
        """ Encodes the image as raster bit image commands.

        @param max_rows:   the maximum number of rows of a single command
        @type max_rows:    int
        @returns:          the encoded commands
        @rtype:            bytes
        """


class IImageTransformer(Interface):
    """ Transforms an image before it is printed. """

    def transform(image):
        """ Transforms the image.

        @param image:   the image to print
        @type image:    L{IRasterImage}
        @returns:       the image that should be printed, or None if
                        nothing should be printed at all
        """


class IRasterPrinter(Interface):
    """ A printer that receives raw data, raster images and drives a cash
    drawer.
    """

    def print_raw(data):
        """ Sends the data verbatim to the printer.

        @param data:   printer native commands
        @type data:    bytes
        """

    def print_raster_image(image):
        """ Prints the image, cutting the paper after each page.

        @param image:   the image to print
        @type image:    L{IRasterImage}
        """

    def open_cash_box():
        """ Pulses the cash drawer connected to the printer. """
