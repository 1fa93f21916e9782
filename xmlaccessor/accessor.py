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
This module contains the accessor class for reading XML configuration documents.
"""
import threading
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from xmlschema import XMLResource, XMLSchemaException

from xmlaccessor.exceptions import XMLAccessorError, XMLLoadError, \
    XMLValidationIssuesError, XMLDocumentNotLoadedError, XPathQueryError
from xmlaccessor.issues import ValidationIssue, IssueCollector, IssueCallbackType
from xmlaccessor.logger import logger, logged
from xmlaccessor.results import Result, ValidationReport
from xmlaccessor.settings import AccessorSettings, accessor_settings
from xmlaccessor.translation import gettext as _, ngettext
from xmlaccessor.validation import ValidationRun
from xmlaccessor.xpath import get_xpath_root, select, get_text_content, \
    get_attribute_value

__all__ = ['DocumentAccessor']

T = TypeVar('T')


class DocumentAccessor:
    """
    Accessor for an XML document file, that offers loading, schema validation
    and XPath based extraction of text and attribute values.

    The operations never raise an exception for a failure: each one returns a
    :class:`Result` that is false if the operation has failed, and records the
    description of the failure in :attr:`last_error`.

    :param source_path: the path of the XML document. No I/O is performed \
    at creation.
    :param settings: optional settings, for default the module level \
    *accessor_settings* are used. The accessor keeps its own copy.
    :param options: settings options that override the ones of *settings*.
    """
    document: Optional[XMLResource] = None
    """The loaded XML document, `None` if it's not loaded."""

    def __init__(self, source_path: Union[str, Path],
                 settings: Optional[AccessorSettings] = None,
                 **options: Any) -> None:
        if settings is None:
            settings = accessor_settings
        self.settings = settings.copy(**options)

        self._source_path = str(source_path)
        self._last_error = ''
        self._validation_issue_count = 0
        self._xpath_root: Any = None
        self._namespaces: dict[str, str] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return '%s(source_path=%r, loaded=%r)' % (
            self.__class__.__name__, self._source_path, self.is_loaded
        )

    @property
    def source_path(self) -> str:
        """The path of the XML document."""
        return self._source_path

    @property
    def last_error(self) -> str:
        """
        The description of the failure of the last operation, an empty string
        if it has succeeded. For validation contains the messages of all the
        issues found, each one prefixed by a newline.
        """
        return self._last_error

    @property
    def validation_issue_count(self) -> int:
        """The number of issues reported by the last validation run."""
        return self._validation_issue_count

    @property
    def is_loaded(self) -> bool:
        return self.document is not None

    @property
    def root(self) -> Any:
        """The root element of the loaded document, `None` if it's not loaded."""
        return None if self.document is None else self.document.root

    @property
    def namespaces(self) -> dict[str, str]:
        """The namespace prefixes available to XPath expressions."""
        return self._namespaces.copy()

    def _success(self, value: Optional[T] = None) -> Result[T]:
        self._last_error = ''
        return Result.success(value)

    def _failure(self, error: XMLAccessorError) -> Result[Any]:
        logger.debug("%s", error.message)
        self._last_error = error.message
        return Result.failure(error)

    def _query_failure(self, template: str, err: XMLAccessorError,
                       *args: str) -> Result[Any]:
        message = template.format(*args, err.message)
        cause = err.cause or err
        return self._failure(type(err)(message, args[-1], cause, err.line, err.column))

    @logged
    def load(self) -> Result[Any]:
        """
        Loads the XML document into memory. Replaces a previously loaded document,
        that is discarded also if the new load fails.

        :param loglevel: optional keyword argument for setting a logging level \
        during the load.
        :return: a result with the root element of the document.
        """
        with self._lock:
            logger.debug("Load XML document %r", self._source_path)
            try:
                document = XMLResource(self._source_path, lazy=False,
                                       **self.settings.get_resource_kwargs())
            except (SyntaxError, OSError, XMLSchemaException, ValueError, TypeError) as err:
                self.document = self._xpath_root = None
                self._namespaces = {}
                msg = _("Error loading XML document '{}' into memory: {}")
                return self._failure(XMLLoadError.from_cause(
                    msg.format(self._source_path, err), self._source_path, err
                ))

            self.document = document
            self._xpath_root = get_xpath_root(document.root)
            self._namespaces = {
                k: v for k, v in document.get_namespaces(
                    self.settings.namespaces, root_only=False
                ).items() if k
            }
            return self._success(document.root)

    @logged
    def validate(self, collector: Optional[IssueCallbackType] = None) -> ValidationReport:
        """
        Validates the XML document against the schemas declared by location hints
        or inline, with a streaming read that also checks the well-formedness.
        The document is not loaded into memory.

        :param collector: an optional callable that receives each issue, in the \
        order the issues are reported.
        :param loglevel: optional keyword argument for setting a logging level \
        during the validation.
        :return: a report with the issues found, that is true only if the \
        document has been entirely read without issues.
        """
        with self._lock:
            self._last_error = ''
            self._validation_issue_count = 0

            issues = IssueCollector(self._add_issue,
                                    report_warnings=self.settings.report_warnings)
            if collector is not None:
                issues.callbacks.append(collector)

            try:
                ValidationRun(self._source_path, self.settings, issues).run()
            except XMLAccessorError as err:
                logger.debug("%s", err.message)
                self._last_error = err.message
                return ValidationReport(issues.issues, err)

            logger.info(ngettext("Validation of %r: %d issue found",
                                 "Validation of %r: %d issues found",
                                 self._validation_issue_count),
                        self._source_path, self._validation_issue_count)

            if self._validation_issue_count:
                error = XMLValidationIssuesError(self._last_error, self._source_path)
                return ValidationReport(issues.issues, error)
            return ValidationReport(issues.issues)

    def _add_issue(self, issue: ValidationIssue) -> None:
        self._validation_issue_count += 1
        self._last_error += f'\n{issue}'

    def _select(self, path: str) -> list[Any]:
        if self._xpath_root is None:
            msg = _("XML document '{}' is not loaded")
            raise XMLDocumentNotLoadedError(msg.format(self._source_path), self._source_path)

        logger.debug("Select %r from %r", path, self._source_path)
        return select(self._xpath_root, path, self._namespaces,
                      self.settings.get_xpath_parser())

    def _first(self, items: list[Any]) -> Any:
        if not items:
            raise XPathQueryError(_("no node matches the path"))
        return items[0]

    def get_element(self, path: str) -> Result[str]:
        """
        Returns the text content of the first node selected by an XPath expression,
        concatenating all the text of the descendants for elements. Fails if the
        expression is malformed or if it doesn't select any node.
        """
        with self._lock:
            try:
                items = self._select(path)
            except XMLAccessorError as err:
                msg = _("Error, could not initialize element '{}': {}")
                return self._query_failure(msg, err, path)

            try:
                return self._success(get_text_content(self._first(items)))
            except XMLAccessorError as err:
                msg = _("Error, could not get inner text of element '{}': {}")
                return self._query_failure(msg, err, path)

    def get_element_list(self, path: str) -> Result[list[str]]:
        """
        Returns the text contents of the nodes selected by an XPath expression,
        in document order. If no node is selected the result is an empty list.
        """
        with self._lock:
            try:
                items = self._select(path)
            except XMLAccessorError as err:
                msg = _("Error, could not initialize elements at '{}': {}")
                return self._query_failure(msg, err, path)

            try:
                return self._success([get_text_content(x) for x in items])
            except XMLAccessorError as err:
                msg = _("Error, could not get inner text of elements at '{}': {}")
                return self._query_failure(msg, err, path)

    def get_attribute(self, path: str, attr: str) -> Result[str]:
        """
        Returns the value of an attribute of the first element selected by an
        XPath expression. The attribute name can be prefixed, using a prefix
        of the document or of the settings, or an extended name.
        """
        with self._lock:
            try:
                items = self._select(path)
            except XMLAccessorError as err:
                msg = _("Error, could not initialize element '{}': {}")
                return self._query_failure(msg, err, path)

            try:
                value = get_attribute_value(self._first(items), attr, self._namespaces)
            except XMLAccessorError as err:
                msg = _("Error, could not get attribute '{}' of element '{}': {}")
                return self._query_failure(msg, err, attr, path)
            else:
                return self._success(value)

    def get_attribute_list(self, path: str, attr: str) -> Result[list[str]]:
        """
        Returns the values of an attribute of the elements selected by an XPath
        expression, in document order. If no element is selected the result is
        an empty list. Fails, without partial results, if any of the selected
        elements doesn't have the attribute.
        """
        with self._lock:
            try:
                items = self._select(path)
            except XMLAccessorError as err:
                msg = _("Error, could not initialize elements at '{}': {}")
                return self._query_failure(msg, err, path)

            try:
                values = [get_attribute_value(x, attr, self._namespaces) for x in items]
            except XMLAccessorError as err:
                msg = _("Error, could not get inner text of attributes '{}' at '{}': {}")
                return self._query_failure(msg, err, attr, path)
            else:
                return self._success(values)
