#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
XPath selection on loaded documents, and projection of the selected nodes
to their text content or to an attribute value.
"""
from collections.abc import Iterator, Mapping
from typing import Any, Optional
from xml.etree import ElementTree

import elementpath
from elementpath import ElementPathError, XPath1Parser

from xmlaccessor.exceptions import XPathQueryError, XMLAttributeMissingError
from xmlaccessor.translation import gettext as _

__all__ = ['XML_NAMESPACE', 'get_xpath_root', 'select', 'iter_text',
           'get_text_content', 'get_extended_name', 'get_attribute_value']

XML_NAMESPACE = 'http://www.w3.org/XML/1998/namespace'


def is_element(item: Any) -> bool:
    return hasattr(item, 'tag') and hasattr(item, 'attrib') and isinstance(item.tag, str)


def get_xpath_root(root: Any) -> Any:
    """
    Returns the document that wraps a root element, so the absolute paths
    and the relative ones are resolved from the document node.
    """
    if hasattr(root, 'getroottree'):
        return root.getroottree()  # an lxml element
    return ElementTree.ElementTree(root)


def select(root: Any, path: str,
           namespaces: Optional[Mapping[str, str]] = None,
           parser: type[XPath1Parser] = XPath1Parser) -> list[Any]:
    """
    Selects the items matching an XPath expression, in document order.

    :param root: the document or the element used as XPath root.
    :param path: the XPath expression.
    :param namespaces: an optional mapping from namespace prefix to URI.
    :param parser: the XPath parser class to use.
    :raises: :exc:`XPathQueryError` if the expression is malformed, if its \
    evaluation fails or if it doesn't evaluate to a sequence of nodes.
    """
    try:
        results = elementpath.select(root, path, namespaces, parser=parser)
    except ElementPathError as err:
        raise XPathQueryError.from_cause(str(err), path, err) from err

    if not isinstance(results, list):
        msg = _("expression must evaluate to a node-set, got {!r}")
        raise XPathQueryError(msg.format(results), path)
    return results


def iter_text(elem: Any) -> Iterator[str]:
    """Iterates the text nodes of an element subtree, skipping comments and PIs."""
    if isinstance(elem.tag, str) and elem.text:
        yield elem.text
    for child in elem:
        yield from iter_text(child)
        if child.tail:
            yield child.tail


def get_text_content(item: Any) -> str:
    """
    Returns the concatenated text content of a selected item. Attribute values
    and text nodes are selected as strings and are returned unchanged, comments
    and processing instructions return their text.
    """
    if isinstance(item, str):
        return item
    elif is_element(item):
        return ''.join(iter_text(item))
    elif hasattr(item, 'getroot'):
        return ''.join(iter_text(item.getroot()))
    elif callable(getattr(item, 'tag', None)):
        return item.text or ''  # a comment or a processing instruction

    msg = _("the selected item {!r} is not a node")
    raise XPathQueryError(msg.format(item))


def get_extended_name(name: str, namespaces: Optional[Mapping[str, str]] = None) -> str:
    """
    Returns the extended name '{uri}local' of a prefixed name. Names that are
    already extended and names without a prefix are returned unchanged.
    """
    if not name or name[0] == '{' or ':' not in name:
        return name

    prefix, local_name = name.split(':', 1)
    if prefix == 'xml':
        return '{%s}%s' % (XML_NAMESPACE, local_name)

    try:
        uri = (namespaces or {})[prefix]
    except KeyError:
        raise XPathQueryError(_("prefix {!r} not found in namespace map").format(prefix))
    else:
        return '{%s}%s' % (uri, local_name) if uri else local_name


def get_attribute_value(item: Any, name: str,
                        namespaces: Optional[Mapping[str, str]] = None) -> str:
    """
    Returns the value of an attribute of a selected element.

    :raises: :exc:`XMLAttributeMissingError` if the attribute is missing, \
    :exc:`XPathQueryError` if the item is not an element.
    """
    if not is_element(item):
        msg = _("the selected item {!r} is not an element")
        raise XPathQueryError(msg.format(item))

    value = item.get(get_extended_name(name, namespaces))
    if value is None:
        msg = _("element {!r} has no attribute {!r}")
        raise XMLAttributeMissingError(msg.format(item.tag, name))
    return value
