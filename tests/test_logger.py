#!/usr/bin/env python
#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Tests on logging and translation helpers"""
import unittest
import gettext
import logging

from xmlaccessor import translation, XMLAccessorTypeError, XMLAccessorValueError
from xmlaccessor.logger import logger, get_logging_level, set_logging_level, \
    logging_level, logged


class TestLogger(unittest.TestCase):

    def setUp(self):
        self.level = logger.level

    def tearDown(self):
        logger.setLevel(self.level)

    def test_get_logging_level(self):
        self.assertEqual(get_logging_level('debug'), logging.DEBUG)
        self.assertEqual(get_logging_level(' Warning '), logging.WARNING)
        self.assertEqual(get_logging_level(logging.ERROR), logging.ERROR)

        with self.assertRaises(XMLAccessorValueError):
            get_logging_level('verbose')
        with self.assertRaises(XMLAccessorTypeError):
            get_logging_level(True)
        with self.assertRaises(XMLAccessorTypeError):
            get_logging_level(None)

    def test_set_logging_level(self):
        set_logging_level('ERROR')
        self.assertEqual(logger.level, logging.ERROR)
        set_logging_level(logging.INFO)
        self.assertEqual(logger.level, logging.INFO)

    def test_logging_level_context(self):
        set_logging_level(logging.WARNING)
        with logging_level('DEBUG'):
            self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logger.level, logging.WARNING)

        with logging_level(None):
            self.assertEqual(logger.level, logging.WARNING)

    def test_logged_decorator(self):
        @logged
        def func(value):
            logger.debug("Called with %r", value)
            return logger.level

        set_logging_level(logging.WARNING)
        with self.assertLogs('xmlaccessor', level='DEBUG') as ctx:
            func(1, loglevel='DEBUG')
            logger.warning("done")
        self.assertListEqual(ctx.output, ['DEBUG:xmlaccessor:Called with 1',
                                          'WARNING:xmlaccessor:done'])

        self.assertEqual(func(2), logging.WARNING)
        self.assertEqual(func(3, loglevel=logging.ERROR), logging.ERROR)
        self.assertEqual(logger.level, logging.WARNING)


class TestTranslation(unittest.TestCase):

    def setUp(self):
        self.translation_classes = (gettext.NullTranslations, gettext.GNUTranslations)

    def tearDown(self):
        translation.deactivate()

    def test_activation(self):
        self.assertFalse(translation.is_active())
        translation.activate(['it'])
        self.assertTrue(translation.is_active())
        self.assertIsInstance(translation._translation, self.translation_classes)

        translation.deactivate()
        self.assertFalse(translation.is_active())
        self.assertIsNone(translation._translation)

    def test_missing_catalog(self):
        with self.assertRaises(OSError):
            translation.activate(['xx'], fallback=False)
        self.assertFalse(translation.is_active())

    def test_gettext(self):
        msg = "no node matches the path"
        self.assertEqual(translation.gettext(msg), msg)
        self.assertEqual(translation.ngettext('%d issue', '%d issues', 1), '%d issue')
        self.assertEqual(translation.ngettext('%d issue', '%d issues', 2), '%d issues')

        translation.activate(['xx'])  # fallback to untranslated messages
        self.assertEqual(translation.gettext(msg), msg)
        self.assertEqual(translation.ngettext('%d issue', '%d issues', 0), '%d issues')


if __name__ == '__main__':
    import platform
    header_template = "Test xmlaccessor's logging and translation with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
