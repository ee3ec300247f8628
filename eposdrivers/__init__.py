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

import gettext
import os

_version = "1.0.0"
__version__ = tuple(int(n) for n in _version.split('.'))

__all__ = ["__version__"]


def enable_translation(domain, root='..', enable_global=None):
    localedir = os.path.join(os.path.dirname(__file__), 'locale')
    if not os.path.isdir(localedir):
        localedir = os.path.join(root, 'locale')

    gettext.bindtextdomain(domain, localedir)

    if enable_global:
        gettext.textdomain(domain)


enable_translation('eposdrivers')
