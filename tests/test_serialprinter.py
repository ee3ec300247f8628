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

from unittest import mock

from serial import SerialException, PARITY_NONE, STOPBITS_ONE
from zope.interface.verify import verifyObject

from eposdrivers.escpos import HW_INIT, PAPER_FULL_CUT, CD_KICK_2
from eposdrivers.exceptions import (ConfigError, EmptyPayloadError,
                                    TransportOpenError, TransportWriteError)
from eposdrivers.interfaces import IRasterPrinter
from eposdrivers.printers.serialprinter import SerialPrinter
from eposdrivers.raster import RasterImage
from eposdrivers.transformers import BlankImageFilter

from tests.base import _BaseTest, RecordingPortFactory


def _two_pages():
    image = RasterImage.from_matrix([[True] * 8])
    image.append(RasterImage.from_matrix([[True] * 8, [False] * 8]))
    return image


class TestConnection(_BaseTest):

    def test_interface(self):
        self.assertTrue(verifyObject(IRasterPrinter, self._device))

    def test_open_uses_parsed_settings(self):
        port = self._device.open()
        port.close()
        self.assertEqual(self._factory.settings,
                         [('COM3', 9600, 8, PARITY_NONE, STOPBITS_ONE)])

    def test_open_empty_config(self):
        device = SerialPrinter('', port_factory=self._factory)
        with self.assertRaises(ConfigError):
            device.open()
        self.assertEqual(self._factory.settings, [])

    def test_open_error(self):
        error = SerialException("could not open port COM3")
        factory = RecordingPortFactory(open_error=error)
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportOpenError) as cm:
            device.open()
        self.assertIs(cm.exception.__cause__, error)
        self.assertIn('COM3', str(cm.exception))

    def test_reset(self):
        port = self._device.reset()
        self.assertTrue(port.is_open)
        port.close()
        self.assertEqual(self._factory.written, [HW_INIT])

    def test_reset_write_error_closes_port(self):
        factory = RecordingPortFactory(fail_write=lambda data: True)
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportWriteError):
            device.reset()
        self.assertEqual(factory.opened, 1)
        self.assertNoPortLeak(factory)

    def test_repr(self):
        self.assertEqual(repr(self._device),
                         "<SerialPrinter serial_config='COM3,baud=9600' "
                         "paper_width=576 margin_bottom=0>")

    def test_configuration_is_read_only(self):
        for name in ['serial_config', 'paper_width', 'margin_bottom',
                     'cut_command', 'cash_drawer_command', 'transformer',
                     'settle_time', 'port_factory']:
            with self.assertRaises(AttributeError):
                setattr(self._device, name, None)
        self.assertEqual(self._device.serial_config, 'COM3,baud=9600')


class TestPrintRaw(_BaseTest):

    def test_print_raw(self):
        self._device.print_raw(b'hello\n')
        self.assertEqual(self._factory.events,
                         [('O', None), ('W', b'hello\n'), ('C', None)])

    def test_print_raw_does_not_reset(self):
        self._device.print_raw(b'\x1b@abc')
        self.assertEqual(self._factory.written, [b'\x1b@abc'])

    def test_print_raw_empty(self):
        for data in [b'', None]:
            with self.assertRaises(EmptyPayloadError):
                self._device.print_raw(data)
        self.assertEqual(self._factory.written, [])
        self.assertEqual(self._factory.opened, 2)
        self.assertNoPortLeak()

    def test_print_raw_write_error(self):
        factory = RecordingPortFactory(fail_write=lambda data: True)
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportWriteError) as cm:
            device.print_raw(b'data')
        self.assertIsInstance(cm.exception.__cause__, SerialException)
        self.assertNoPortLeak(factory)

    def test_print_raw_open_error(self):
        factory = RecordingPortFactory(open_error=OSError("busy"))
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportOpenError):
            device.print_raw(b'data')
        self.assertEqual(factory.opened, 0)
        self.assertEqual(factory.closed, 0)

    @mock.patch('eposdrivers.printers.serialprinter.time.sleep')
    def test_print_raw_settles_before_closing(self, sleep):
        device = self.get_device(settle_time=0.5)
        sleep.side_effect = lambda seconds: self.assertEqual(
            self._factory.closed, 0)
        device.print_raw(b'data')
        sleep.assert_called_once_with(0.5)
        self.assertNoPortLeak()

    @mock.patch('eposdrivers.printers.serialprinter.time.sleep')
    def test_no_settle_time(self, sleep):
        self._device.print_raw(b'data')
        self.assertFalse(sleep.called)


class TestPrintRasterImage(_BaseTest):

    def test_print_single_page(self):
        device = self.get_device(paper_width=24, margin_bottom=2,
                                 cut_command=b'\x1bi')
        device.print_raster_image(RasterImage.from_matrix([[True] * 8]))
        # One byte of margin on the left and two blank rows at the bottom
        page = (b'\x1dv0\x00\x02\x00\x03\x00' +
                b'\x00\xff' + b'\x00\x00' * 2)
        self.assertEqual(self._factory.events,
                         [('O', None), ('W', HW_INIT), ('W', page),
                          ('W', b'\x1bi'), ('C', None)])

    def test_pages_alternate_with_cuts(self):
        self._device.print_raster_image(_two_pages())
        written = self._factory.written
        self.assertEqual(len(written), 5)
        self.assertEqual(written[0], HW_INIT)
        for page in written[1::2]:
            self.assertTrue(page.startswith(b'\x1dv0'))
        self.assertEqual(written[2::2], [PAPER_FULL_CUT] * 2)
        self.assertEqual(self._factory.opened, 1)
        self.assertNoPortLeak()

    @mock.patch('eposdrivers.printers.serialprinter.time.sleep')
    def test_settle_after_each_cut(self, sleep):
        device = self.get_device(settle_time=1)
        calls = []
        sleep.side_effect = lambda seconds: calls.append(
            self._factory.events[-1])
        device.print_raster_image(_two_pages())
        self.assertEqual(calls, [('W', PAPER_FULL_CUT)] * 2)

    def test_transformer_veto(self):
        device = self.get_device(transformer=lambda image: None)
        device.print_raster_image(_two_pages())
        self.assertEqual(self._factory.events, [])

    def test_blank_filter(self):
        device = self.get_device(transformer=BlankImageFilter())
        device.print_raster_image(RasterImage(16, 10))
        self.assertEqual(self._factory.opened, 0)

    def test_transformer_result_is_printed(self):
        replacement = RasterImage.from_matrix([[True]])
        transformer = mock.Mock()
        transformer.transform.return_value = replacement
        device = self.get_device(transformer=transformer, paper_width=8)
        original = _two_pages()
        device.print_raster_image(original)
        transformer.transform.assert_called_once_with(original)
        self.assertEqual(self._factory.written[1],
                         b'\x1dv0\x00\x01\x00\x01\x00\x80')

    def test_reset_failure_aborts(self):
        factory = RecordingPortFactory(fail_write=lambda data: data == HW_INIT)
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportWriteError):
            device.print_raster_image(_two_pages())
        self.assertEqual(factory.written, [])
        self.assertNoPortLeak(factory)

    def test_write_failure_midway(self):
        cuts = []

        def fail_second_cut(data):
            if data == PAPER_FULL_CUT:
                cuts.append(data)
            return len(cuts) == 2

        factory = RecordingPortFactory(fail_write=fail_second_cut)
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportWriteError):
            device.print_raster_image(_two_pages())
        # The first page was already printed and cut
        self.assertEqual(len(factory.written), 4)
        self.assertEqual(factory.written[2], PAPER_FULL_CUT)
        self.assertNoPortLeak(factory)


class TestOpenCashBox(_BaseTest):

    def test_open_cash_box(self):
        self._device.open_cash_box()
        self.assertEqual(self._factory.events,
                         [('O', None), ('W', HW_INIT), ('W', CD_KICK_2),
                          ('C', None)])

    def test_custom_drawer_command(self):
        device = self.get_device(cash_drawer_command=b'\x1bp\x01\x19\xfa')
        device.open_cash_box()
        self.assertEqual(self._factory.written, [HW_INIT, b'\x1bp\x01\x19\xfa'])

    def test_reset_failure(self):
        factory = RecordingPortFactory(fail_write=lambda data: data == HW_INIT)
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportWriteError):
            device.open_cash_box()
        self.assertEqual(factory.events,
                         [('O', None), ('F', HW_INIT), ('C', None)])

    def test_drawer_write_failure(self):
        factory = RecordingPortFactory(fail_write=lambda data: data == CD_KICK_2)
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportWriteError):
            device.open_cash_box()
        self.assertNoPortLeak(factory)

    def test_open_error(self):
        factory = RecordingPortFactory(open_error=SerialException("missing"))
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportOpenError):
            device.open_cash_box()
        self.assertEqual(factory.events, [])


class TestCloseFailure(_BaseTest):

    def setUp(self):
        self._factory = RecordingPortFactory(
            close_error=SerialException("device unplugged"))
        self._device = self.get_device()

    def _failing_writes(self):
        factory = RecordingPortFactory(
            fail_write=lambda data: True,
            close_error=SerialException("device unplugged"))
        return factory, self.get_device(port_factory=factory)

    def _assert_close_error(self, func, *args):
        with self.assertRaises(TransportWriteError) as cm:
            func(*args)
        self.assertIn('close', str(cm.exception))
        self.assertIsInstance(cm.exception.__cause__, SerialException)
        self.assertNoPortLeak()

    def test_print_raw(self):
        self._assert_close_error(self._device.print_raw, b'data')
        self.assertEqual(self._factory.written, [b'data'])

    def test_print_raster_image(self):
        self._assert_close_error(self._device.print_raster_image, _two_pages())
        self.assertEqual(len(self._factory.written), 5)

    def test_open_cash_box(self):
        self._assert_close_error(self._device.open_cash_box)
        self.assertEqual(self._factory.written, [HW_INIT, CD_KICK_2])

    def test_write_error_is_kept(self):
        factory, device = self._failing_writes()
        operations = [(device.print_raw, (b'data', ), 'raw'),
                      (device.print_raster_image, (_two_pages(), ), 'reset'),
                      (device.open_cash_box, (), 'reset')]
        for func, args, what in operations:
            with self.assertRaises(TransportWriteError) as cm:
                func(*args)
            self.assertIn(what, str(cm.exception))
            self.assertNotIn('close', str(cm.exception))
        self.assertEqual(factory.opened, 3)
        self.assertNoPortLeak(factory)

    def test_empty_payload_is_kept(self):
        with self.assertRaises(EmptyPayloadError):
            self._device.print_raw(b'')
        self.assertNoPortLeak()

    def test_reset_close_error_is_kept(self):
        factory = RecordingPortFactory(
            fail_write=lambda data: data == HW_INIT,
            close_error=OSError("device unplugged"))
        device = self.get_device(port_factory=factory)
        with self.assertRaises(TransportWriteError) as cm:
            device.reset()
        self.assertIn('reset', str(cm.exception))
        self.assertNoPortLeak(factory)
