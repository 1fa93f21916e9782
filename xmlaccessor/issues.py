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
Records and collectors of the issues reported during a validating read.
"""
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional, Union

from xmlschema import XMLSchemaValidationError

from xmlaccessor.translation import gettext as _

__all__ = ['ERROR', 'WARNING', 'ValidationIssue', 'IssueCollector', 'IssueCallbackType']

ERROR = 'error'
WARNING = 'warning'


@dataclass(frozen=True)
class ValidationIssue:
    """
    An issue reported during the validation of an XML document.

    :param severity: 'error' or 'warning'.
    :param message: the message of the issue.
    :param line: the line of the XML document, if available.
    :param path: the path of the involved element, if available.
    """
    severity: str
    message: str
    line: Optional[int] = None
    path: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity == WARNING

    def __str__(self) -> str:
        if self.severity == WARNING:
            text = _("Warning: No schema found. Validation could not be performed. {}")
        else:
            text = _("Error: {}")
        text = text.format(self.message)
        if self.line is not None:
            text += _(" (line {})").format(self.line)
        return text

    @classmethod
    def from_validation_error(cls, error: XMLSchemaValidationError) -> 'ValidationIssue':
        """Builds an error issue from an xmlschema's validation error."""
        message = error.reason or error.message
        if error.path and error.path not in message:
            message = '{}: {}'.format(error.path, message)

        sourceline = getattr(error, 'sourceline', None)
        return cls(
            severity=ERROR,
            message=message,
            line=sourceline if isinstance(sourceline, int) else None,
            path=error.path,
        )

    @classmethod
    def from_element(cls, severity: str, message: str, elem: Any) -> 'ValidationIssue':
        """Builds an issue about an XML element, taking the line from lxml elements."""
        sourceline = getattr(elem, 'sourceline', None)
        return cls(severity, message, line=sourceline if isinstance(sourceline, int) else None)


IssueCallbackType = Callable[[ValidationIssue], Any]


class IssueCollector:
    """
    Collects the issues of a validation run in the order they are reported.
    Can be called directly as an issue callback. Other callbacks can be
    registered for receiving the same issues.

    :param callbacks: optional callables that receive each collected issue.
    :param report_warnings: if `False` warning issues are discarded.
    """
    def __init__(self, *callbacks: IssueCallbackType, report_warnings: bool = True) -> None:
        self.issues: list[ValidationIssue] = []
        self.callbacks = list(callbacks)
        self.report_warnings = report_warnings

    def __repr__(self) -> str:
        return '%s(errors=%d, warnings=%d)' % (
            self.__class__.__name__, self.error_count, self.warning_count
        )

    def __call__(self, issue: ValidationIssue) -> None:
        if issue.is_warning and not self.report_warnings:
            return

        self.issues.append(issue)
        for callback in self.callbacks:
            callback(issue)

    def __len__(self) -> int:
        return len(self.issues)

    def __iter__(self) -> Iterator[ValidationIssue]:
        yield from self.issues

    def add_error(self, error: Union[str, XMLSchemaValidationError],
                  elem: Any = None) -> None:
        if isinstance(error, XMLSchemaValidationError):
            self(ValidationIssue.from_validation_error(error))
        else:
            self(ValidationIssue.from_element(ERROR, error, elem))

    def add_warning(self, message: str, elem: Any = None) -> None:
        self(ValidationIssue.from_element(WARNING, message, elem))

    def clear(self) -> None:
        self.issues.clear()

    @property
    def errors(self) -> list[ValidationIssue]:
        return [x for x in self.issues if x.is_error]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [x for x in self.issues if x.is_warning]

    @property
    def error_count(self) -> int:
        return sum(x.is_error for x in self.issues)

    @property
    def warning_count(self) -> int:
        return sum(x.is_warning for x in self.issues)

    @property
    def message(self) -> str:
        """The messages of all the issues, each one prefixed by a newline."""
        return ''.join(f'\n{issue}' for issue in self.issues)
