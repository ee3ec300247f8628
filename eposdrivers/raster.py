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
Raster images: a 1-bit bitmap split in pages and encoded as ESC/POS raster
commands.
"""

from zope.interface import implementer

from eposdrivers.escpos import raster_bit_image
from eposdrivers.interfaces import IRasterImage
from eposdrivers.utils import pack_bits

#: The maximum number of rows sent in a single raster command
DEFAULT_MAX_ROWS = 1024


@implementer(IRasterImage)
class RasterImage:
    """ A bitmap with one bit per dot. Each row is packed in
    (width + 7) // 8 bytes, most significant bit first, and a set bit is a
    black dot.

    The image may hold several pages: C{cuts} are the rows where the paper
    should be cut.
    """

    def __init__(self, width, height, data=None, cuts=None):
        if width < 0 or height < 0:
            raise ValueError("Invalid image size %dx%d" % (width, height))
        self.width = width
        self.height = height
        if data is None:
            data = bytes(self.width_bytes * height)
        if len(data) != self.width_bytes * height:
            raise ValueError("Expected %d bytes of image data, got %d"
                             % (self.width_bytes * height, len(data)))
        self.data = bytearray(data)
        self.cuts = sorted(set(c for c in (cuts or []) if 0 < c < height))

    def __repr__(self):
        return '<RasterImage width=%d height=%d cuts=%r>' % (
            self.width, self.height, self.cuts)

    @classmethod
    def from_image(cls, image, threshold=128):
        """ Creates a raster image from a PIL image.

        @param image:       the image
        @type image:        PIL.Image.Image
        @param threshold:   gray levels below this are printed as black
        @type threshold:    int
        """
        gray = image.convert('L')
        # mode '1' keeps a set bit for each dark dot
        mono = gray.point(lambda p: 255 if p < threshold else 0, mode='1')
        return cls(mono.width, mono.height, mono.tobytes())

    @classmethod
    def from_matrix(cls, matrix):
        """ Creates a raster image from a list of rows, where each row is a
        list of booleans and True is a black dot.
        """
        if not matrix:
            return cls(0, 0)
        width = len(matrix[0])
        data = b''.join(pack_bits(row) for row in matrix)
        return cls(width, len(matrix), data)

    @property
    def width_bytes(self):
        return (self.width + 7) // 8

    def get_pixel(self, x, y):
        """ Returns True if the dot at x, y is black """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError("(%d, %d) is outside the image" % (x, y))
        byte = self.data[y * self.width_bytes + x // 8]
        return bool(byte & (0x80 >> (x % 8)))

    def is_blank(self):
        return not any(self.data)

    def _rows(self, start=0, end=None):
        if end is None:
            end = self.height
        wb = self.width_bytes
        return [bytes(self.data[y * wb:(y + 1) * wb]) for y in range(start, end)]

    def append(self, other):
        """ Stacks other below this image, the paper will be cut between
        them.
        """
        width = max(self.width, other.width)
        wb = (width + 7) // 8
        data = bytearray()
        for row in self._rows() + other._rows():
            data += row + bytes(wb - len(row))

        cuts = list(self.cuts)
        if self.height and other.height:
            cuts.append(self.height)
        cuts.extend(c + self.height for c in other.cuts)

        self.width = width
        self.height += other.height
        self.data = data
        self.cuts = sorted(set(cuts))
        return self

    #
    # IRasterImage
    #

    def cut_pages(self):
        bounds = [0] + self.cuts + [self.height]
        wb = self.width_bytes
        pages = []
        for start, end in zip(bounds, bounds[1:]):
            if end <= start:
                continue
            pages.append(RasterImage(self.width, end - start,
                                     self.data[start * wb:end * wb]))
        return pages

    def auto_margin_left(self, paper_width):
        if self.width >= paper_width:
            return
        # Margins are added in whole bytes, so the image is centered within
        # 8 dots
        margin = (paper_width - self.width) // 2 // 8
        if not margin:
            return
        padding = bytes(margin)
        data = bytearray()
        for row in self._rows():
            data += padding + row
        self.width += margin * 8
        self.data = data

    def add_margin_bottom(self, rows):
        if rows <= 0:
            return
        self.data += bytes(self.width_bytes * rows)
        self.height += rows

    def to_escpos_raster_command(self, max_rows=DEFAULT_MAX_ROWS):
        if max_rows <= 0:
            raise ValueError("max_rows must be positive, got %d" % (max_rows, ))
        wb = self.width_bytes
        if not wb or not self.height:
            return b''

        commands = []
        for start in range(0, self.height, max_rows):
            rows = min(max_rows, self.height - start)
            commands.append(raster_bit_image(
                wb, rows, self.data[start * wb:(start + rows) * wb]))
        return b''.join(commands)
