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
Functions for general use.
"""

from importlib import import_module


def bits2byte(bits):
    return sum(2 ** i if bit else 0 for i, bit in enumerate(reversed(bits)))


def pack_bits(bits):
    """ Packs a sequence of booleans in bytes, most significant bit first.
    The last byte is padded with zeros.
    """
    bits = list(bits)
    return bytes(bits2byte(bits[i:i + 8] + [False] * (8 - len(bits[i:i + 8])))
                 for i in range(0, len(bits), 8))


def hex2bytes(text):
    """ Converts a string of hexadecimal digits to bytes. Spaces and a
    leading 0x on each group are ignored, so '1d 56 00', '0x1d 0x56 0x00' and
    '1d5600' are the same command.
    """
    groups = [g[2:] if g.lower().startswith('0x') else g for g in text.split()]
    return bytes.fromhex(''.join(groups))


def get_obj_from_module(module_name, obj_name):
    module = import_module(module_name)
    try:
        return getattr(module, obj_name)
    except AttributeError:
        raise ImportError("Can't find %s in module %s" % (obj_name, module_name))


def get_obj_from_path(path):
    """ Loads an object given its dotted path, e.g.
    'eposdrivers.transformers.BlankImageFilter'
    """
    module_name, _sep, obj_name = path.rpartition('.')
    if not module_name:
        raise ImportError("%r is not a dotted path" % (path, ))
    return get_obj_from_module(module_name, obj_name)
