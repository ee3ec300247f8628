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
Eposdrivers exceptions definition
"""


class DriverError(Exception):
    "Base exception for all printer errors"

    def __init__(self, error='', code=-1):
        if code != -1:
            error = '%d: %s' % (code, error)
        Exception.__init__(self, error)
        self.code = code


class ConfigError(DriverError):
    "Invalid or missing configuration"


class TransportError(DriverError):
    "The serial transport failed"


class TransportOpenError(TransportError):
    "The port could not be opened"


class TransportWriteError(TransportError):
    "A write to an open port failed"


class EmptyPayloadError(DriverError):
    "There is no data to send to the printer"
