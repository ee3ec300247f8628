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
Useful functions for accessing the eposdrivers configuration file.
"""

from configparser import ConfigParser
import logging
import os

from eposdrivers.exceptions import ConfigError
from eposdrivers.translation import eposdrivers_gettext

_ = eposdrivers_gettext

log = logging.getLogger('eposdrivers.config')


class EposdriversConfig:
    domain = 'eposdrivers'

    def __init__(self, filename=None):
        if not filename:
            filename = self.domain + '.conf'
        if not os.path.exists(filename):
            filename = os.path.join(self.get_homepath(), filename)
        if not os.path.exists(filename):
            raise ConfigError(_("Config file not found in: `%s'") % filename)

        self.filename = filename
        self.config = ConfigParser()
        self.config.read(filename)
        log.debug("Loaded configuration from %s" % (filename, ))

    def get_homepath(self):
        return os.path.join(os.path.expanduser('~'), '.' + self.domain)

    def has_section(self, section):
        return self.config.has_section(section)

    def get_option(self, option, section):
        if not self.config.has_section(section):
            raise ConfigError(_("Invalid section: %s") % section)
        elif not self.config.has_option(section, option):
            raise ConfigError(_("%s does not have option: %s")
                              % (section, option))
        return self.config.get(section, option)
