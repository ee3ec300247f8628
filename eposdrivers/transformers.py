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
Image transformers applied to an image before it gets printed.
"""

from zope.interface import implementer

from eposdrivers.interfaces import IImageTransformer


@implementer(IImageTransformer)
class IdentityTransformer:
    def transform(self, image):
        return image


@implementer(IImageTransformer)
class BlankImageFilter:
    """ Does not print images without any black dot. """

    def transform(self, image):
        if image.is_blank():
            return None
        return image


@implementer(IImageTransformer)
class FunctionTransformer:
    """ Adapts a function receiving an image and returning an image (or
    None, to skip printing) to L{IImageTransformer}.
    """

    def __init__(self, func):
        if not callable(func):
            raise TypeError("%r is not callable" % (func, ))
        self.func = func

    def __repr__(self):
        return '<FunctionTransformer %r>' % (self.func, )

    def transform(self, image):
        return self.func(image)


def get_transformer(transformer):
    """ Returns an object providing L{IImageTransformer} for transformer,
    which can be one already, a function or None for no transformation.
    """
    if transformer is None:
        return IdentityTransformer()
    if (IImageTransformer.providedBy(transformer) or
            hasattr(transformer, 'transform')):
        return transformer
    return FunctionTransformer(transformer)
