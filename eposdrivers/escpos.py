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

# Based on python-escpos's escpos.constants:
#
# https://github.com/python-escpos/python-escpos/blob/master/src/escpos/constants.py

ESC = b'\x1b'  # Escape
GS = b'\x1d'  # Group Separator

HW_INIT = ESC + b'@'  # Clear data in buffer and reset modes

PAPER_FULL_CUT = GS + b'V\x00'  # Full Paper Cut
PAPER_PART_CUT = GS + b'V\x01'  # Partial Paper Cut

# Pulse on pin 2, 50ms on, 500ms off
CD_KICK_2 = ESC + b'p\x00\x19\xfa'
# Pulse on pin 5, 50ms on, 500ms off
CD_KICK_5 = ESC + b'p\x01\x19\xfa'

RASTER_BIT_IMAGE = GS + b'v0'  # Print raster bit image
RASTER_NORMAL = b'\x00'

# xL xH and yL yH are two bytes parameters
RASTER_MAX_VALUE = 0xffff


def raster_bit_image(width_bytes, height, data, mode=RASTER_NORMAL):
    """ Builds a single GS v 0 command.

    @param width_bytes:   the number of bytes of each row
    @type width_bytes:    int
    @param height:        the number of rows
    @type height:         int
    @param data:          the packed rows, width_bytes * height bytes
    @type data:           bytes
    @returns:             the command
    @rtype:               bytes
    """
    if not 0 < width_bytes <= RASTER_MAX_VALUE:
        raise ValueError("Invalid raster width: %d bytes" % (width_bytes, ))
    if not 0 < height <= RASTER_MAX_VALUE:
        raise ValueError("Invalid raster height: %d rows" % (height, ))
    if len(data) != width_bytes * height:
        raise ValueError("Expected %d bytes of raster data, got %d"
                         % (width_bytes * height, len(data)))

    return (RASTER_BIT_IMAGE + mode +
            bytes([width_bytes & 0xff, width_bytes >> 8 & 0xff,
                   height & 0xff, height >> 8 & 0xff]) +
            bytes(data))
