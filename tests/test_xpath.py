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
"""Tests for XPath selection and projection of selected nodes"""
import unittest
from xml.etree import ElementTree

from elementpath import XPath2Parser
from lxml import etree

from xmlaccessor import XPathQueryError, XMLAttributeMissingError
from xmlaccessor.xpath import XML_NAMESPACE, get_xpath_root, select, iter_text, \
    get_text_content, get_extended_name, get_attribute_value

XML_DATA = """<config xmlns:ex="http://example.com/ns">
  <setting name="timeout" ex:unit="s">30</setting>
  <setting name="title">Main <b>server</b> node<!-- skipped --></setting>
</config>"""

NAMESPACES = {'ex': 'http://example.com/ns'}


class TestXPathSelection(unittest.TestCase):
    etree = ElementTree

    @classmethod
    def setUpClass(cls):
        cls.root = cls.etree.XML(XML_DATA)
        cls.xpath_root = get_xpath_root(cls.root)

    def test_get_xpath_root(self):
        self.assertTrue(hasattr(self.xpath_root, 'getroot'))
        self.assertIs(self.xpath_root.getroot(), self.root)

    def test_select(self):
        self.assertListEqual(select(self.xpath_root, '//setting'), list(self.root))
        self.assertListEqual(select(self.xpath_root, '/config/setting[2]'), [self.root[1]])
        self.assertListEqual(select(self.xpath_root, '//missing'), [])
        self.assertListEqual(select(self.xpath_root, "//setting[@ex:unit='s']", NAMESPACES),
                             [self.root[0]])

    def test_select_errors(self):
        with self.assertRaises(XPathQueryError) as ctx:
            select(self.xpath_root, '//setting[')
        self.assertEqual(ctx.exception.path, '//setting[')
        self.assertIsNotNone(ctx.exception.cause)

        with self.assertRaises(XPathQueryError) as ctx:
            select(self.xpath_root, 'count(//setting)')
        self.assertIn('node-set', str(ctx.exception))

        with self.assertRaises(XPathQueryError):
            select(self.xpath_root, '//ex:setting')

        with self.assertRaises(XPathQueryError):
            select(self.xpath_root, "//setting[ends-with(@name, 'out')]")

    def test_select_with_xpath2(self):
        result = select(self.xpath_root, "//setting[ends-with(@name, 'out')]",
                        parser=XPath2Parser)
        self.assertListEqual(result, [self.root[0]])

    def test_text_content(self):
        self.assertListEqual(list(iter_text(self.root[0])), ['30'])
        self.assertEqual(get_text_content(self.root[0]), '30')
        self.assertEqual(get_text_content(self.root[1]), 'Main server node')
        self.assertEqual(get_text_content('30'), '30')
        self.assertEqual(get_text_content(self.etree.Comment('c')), 'c')
        self.assertEqual(''.join(get_text_content(self.xpath_root).split()),
                         '30Mainservernode')

        with self.assertRaises(XPathQueryError):
            get_text_content(30)

    def test_extended_name(self):
        self.assertEqual(get_extended_name('name'), 'name')
        self.assertEqual(get_extended_name(''), '')
        self.assertEqual(get_extended_name('{http://example.com/ns}unit'),
                         '{http://example.com/ns}unit')
        self.assertEqual(get_extended_name('ex:unit', NAMESPACES),
                         '{http://example.com/ns}unit')
        self.assertEqual(get_extended_name('xml:lang'), '{%s}lang' % XML_NAMESPACE)
        self.assertEqual(get_extended_name('ex:unit', {'ex': ''}), 'unit')

        with self.assertRaises(XPathQueryError) as ctx:
            get_extended_name('foo:unit', NAMESPACES)
        self.assertEqual(str(ctx.exception), "prefix 'foo' not found in namespace map")

    def test_attribute_value(self):
        self.assertEqual(get_attribute_value(self.root[0], 'name'), 'timeout')
        self.assertEqual(get_attribute_value(self.root[0], 'ex:unit', NAMESPACES), 's')

        with self.assertRaises(XMLAttributeMissingError) as ctx:
            get_attribute_value(self.root[1], 'ex:unit', NAMESPACES)
        self.assertEqual(str(ctx.exception), "element 'setting' has no attribute 'ex:unit'")

        with self.assertRaises(XPathQueryError) as ctx:
            get_attribute_value('30', 'name')
        self.assertNotIsInstance(ctx.exception, XMLAttributeMissingError)


class TestXPathSelectionWithLxml(TestXPathSelection):
    etree = etree

    def test_comments_and_processing_instructions(self):
        comments = select(self.xpath_root, '//comment()')
        self.assertEqual(len(comments), 1)
        self.assertEqual(get_text_content(comments[0]), ' skipped ')

        root = etree.XML('<config><?app mode="fast"?><!----></config>')
        xpath_root = get_xpath_root(root)
        pis = select(xpath_root, '//processing-instruction()')
        self.assertListEqual([get_text_content(x) for x in pis], ['mode="fast"'])
        self.assertListEqual([get_text_content(x) for x in select(xpath_root, '//comment()')],
                             [''])
        self.assertEqual(get_text_content(root), '')

        with self.assertRaises(XPathQueryError):
            get_attribute_value(pis[0], 'mode')

    def test_get_xpath_root(self):
        self.assertIsInstance(self.xpath_root, etree._ElementTree)
        self.assertIs(self.xpath_root.getroot(), self.root)


if __name__ == '__main__':
    import platform
    header_template = "Test xmlaccessor's XPath helpers with Python {} on {}"
    header = header_template.format(platform.python_version(), platform.platform())
    print('{0}\n{1}\n{0}'.format("*" * len(header), header))

    unittest.main()
