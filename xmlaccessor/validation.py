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
Schema-based validation of XML documents with a streaming (lazy) read.

The schemas are found from the xsi:schemaLocation/xsi:noNamespaceSchemaLocation
hints of the root element or, if no hint is provided, from the *xs:schema*
elements declared inline as children of the root. In the latter case the root
is a container and each following child element is validated against the
inline schema that declares it.

Only the location hints of the root element and the schemas declared as
children of the root are considered: hints and *xs:schema* elements placed
deeper in the document are ignored.
"""
import copy
import warnings
from typing import Any, Optional

from xmlschema import XMLResource, XMLSchemaBase, XMLSchemaException, \
    fetch_schema_locations

from xmlaccessor.exceptions import XMLValidationSetupError, XMLValidationParseError
from xmlaccessor.issues import ERROR, WARNING, ValidationIssue, IssueCollector
from xmlaccessor.logger import logger
from xmlaccessor.settings import AccessorSettings
from xmlaccessor.translation import gettext as _

__all__ = ['XSD_NAMESPACE', 'XSD_SCHEMA', 'XSD_ELEMENT', 'ValidationRun']

XSD_NAMESPACE = 'http://www.w3.org/2001/XMLSchema'
XSD_SCHEMA = '{%s}schema' % XSD_NAMESPACE
XSD_ELEMENT = '{%s}element' % XSD_NAMESPACE


class InlineSchema:
    """An inline schema and the tags of its global element declarations."""

    def __init__(self, schema: XMLSchemaBase, elem: Any) -> None:
        self.schema = schema
        namespace = elem.get('targetNamespace', '')
        self.tags = frozenset(
            '{%s}%s' % (namespace, child.get('name')) if namespace else child.get('name')
            for child in elem if child.tag == XSD_ELEMENT and child.get('name')
        )

    def __repr__(self) -> str:
        return '%s(tags=%r)' % (self.__class__.__name__, sorted(self.tags))

    def __contains__(self, tag: str) -> bool:
        return tag in self.tags


class ValidationRun:
    """
    A single validating read of an XML document file. Each issue found
    is reported to the collector. Fatal errors abort the read raising an
    :exc:`XMLValidationSetupError` or an :exc:`XMLValidationParseError`.

    :param source_path: the path of the XML document.
    :param settings: the settings of the run.
    :param collector: the collector of the validation issues.
    """
    resource: Optional[XMLResource] = None

    def __init__(self, source_path: str,
                 settings: AccessorSettings,
                 collector: IssueCollector) -> None:
        self.source_path = source_path
        self.settings = settings
        self.collector = collector
        self.schema: Optional[XMLSchemaBase] = None
        self.inline_schemas: list[InlineSchema] = []
        self.declared = False
        self._pending: Optional[list[ValidationIssue]] = []

    def __repr__(self) -> str:
        return '%s(source_path=%r)' % (self.__class__.__name__, self.source_path)

    def run(self) -> None:
        logger.debug("Validate XML document %r", self.source_path)
        self.open()
        try:
            self.read()
        except (SyntaxError, OSError, XMLSchemaException) as err:
            raise self.parse_error(err) from err

    def open(self) -> None:
        """Opens the XML document as a lazy resource, reading up to the root element."""
        try:
            self.resource = XMLResource(
                self.source_path, lazy=True, **self.settings.get_resource_kwargs()
            )
        except SyntaxError as err:
            raise self.parse_error(err) from err
        except (OSError, XMLSchemaException, ValueError, TypeError) as err:
            msg = _("Error initializing XML validation settings: {}").format(err)
            raise XMLValidationSetupError.from_cause(msg, self.source_path, err) from err

    def parse_error(self, err: BaseException) -> XMLValidationParseError:
        msg = _("Error parsing XML document '{}': {}").format(self.source_path, err)
        return XMLValidationParseError.from_cause(msg, self.source_path, err)

    def read(self) -> None:
        assert self.resource is not None
        resource = self.resource
        namespaces = resource.get_namespaces()

        if self.settings.use_location_hints:
            self.schema = self.get_location_schema()

        # Streams the whole document, also when a schema is already available
        for elem in resource.iter_depth():
            if self.schema is not None or not self.settings.process_inline_schemas:
                continue
            elif elem.tag == XSD_SCHEMA:
                self.add_inline_schema(elem)
            else:
                self.validate_child(elem, namespaces)

        if self.schema is not None:
            for error in self.schema.iter_errors(resource, namespaces=namespaces):
                self.report(ValidationIssue.from_validation_error(error))
        elif not self.declared:
            self._pending = None
            msg = _("no schema found for element {!r}, validation skipped")
            self.collector.add_warning(msg.format(resource.root.tag), resource.root)

        self.flush_pending()

    def report(self, issue: ValidationIssue) -> None:
        if self._pending is not None:
            self._pending.append(issue)
        else:
            self.collector(issue)

    def flush_pending(self) -> None:
        if self._pending is not None:
            pending, self._pending = self._pending, None
            for issue in pending:
                self.collector(issue)

    def build_schema(self, source: Any, **kwargs: Any) -> Optional[XMLSchemaBase]:
        """
        Builds a schema, reporting the warnings of the building process as
        validation warnings and building errors as validation errors.
        """
        assert self.resource is not None
        schema_class = self.settings.get_schema_class()
        schema_kwargs = self.settings.get_schema_kwargs(self.resource.base_url)
        schema_kwargs.update(kwargs)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            try:
                schema = schema_class(source, **schema_kwargs)
            except (OSError, XMLSchemaException, SyntaxError) as err:
                schema = None
                msg = _("cannot build schema: {}").format(err)
                self.report(ValidationIssue.from_element(ERROR, msg, source))

        for item in caught:
            if item.category.__module__.startswith('xmlschema'):
                self.report(ValidationIssue(WARNING, str(item.message)))
        return schema

    def get_location_schema(self) -> Optional[XMLSchemaBase]:
        """Returns the schema referred by the location hints, if any."""
        assert self.resource is not None
        if not self.resource.get_locations(self.settings.locations):
            return None

        self.declared = True
        try:
            url, locations = fetch_schema_locations(
                self.resource,
                self.settings.locations,
                base_url=self.settings.base_url,
                allow=self.settings.allow,
                defuse=self.settings.defuse,
                timeout=self.settings.timeout,
            )
        except ValueError as err:
            msg = _("cannot load a schema from location hints: {}").format(err)
            self.report(ValidationIssue.from_element(WARNING, msg, self.resource.root))
            return None

        logger.debug("Build schema from location hint %r", url)
        schema = self.build_schema(url, locations=locations)
        if schema is not None:
            self.flush_pending()
        return schema

    def add_inline_schema(self, elem: Any) -> None:
        # the subtree is cleared by the lazy resource after the iteration step
        self.declared = True
        elem = copy.deepcopy(elem)
        schema = self.build_schema(elem)
        if schema is not None:
            inline_schema = InlineSchema(schema, elem)
            logger.debug("Found inline schema %r", inline_schema)
            self.inline_schemas.append(inline_schema)
            self.flush_pending()

    def validate_child(self, elem: Any, namespaces: dict[str, str]) -> None:
        for inline_schema in self.inline_schemas:
            if elem.tag in inline_schema:
                for error in inline_schema.schema.iter_errors(elem, namespaces=namespaces):
                    self.report(ValidationIssue.from_validation_error(error))
                break
        else:
            msg = _("no schema found for element {!r}, validation skipped")
            self.report(ValidationIssue.from_element(WARNING, msg.format(elem.tag), elem))
