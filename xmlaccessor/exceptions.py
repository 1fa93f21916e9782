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
This module contains the exception classes for the package.

The operation errors, derived from :class:`XMLAccessorError`, are not raised by
the accessor methods: they are carried by the returned results and raised only
on request, calling :meth:`Result.unwrap`.
"""
from typing import Any, Optional


class XMLAccessorException(Exception):
    """Package's base exception class."""


class XMLAccessorTypeError(XMLAccessorException, TypeError):
    pass


class XMLAccessorValueError(XMLAccessorException, ValueError):
    pass


class XMLAccessorError(XMLAccessorException):
    """
    Base class for the failures of the accessor operations.

    :param message: the human-readable description of the failure.
    :param path: the file path or the XPath expression involved.
    :param cause: the underlying exception, if any.
    :param line: the line number where the failure is located, if available.
    :param column: the column number where the failure is located, if available.
    """
    def __init__(self, message: str,
                 path: Optional[str] = None,
                 cause: Optional[BaseException] = None,
                 line: Optional[int] = None,
                 column: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return '%s(message=%r, path=%r)' % (self.__class__.__name__, self.message, self.path)

    @classmethod
    def from_cause(cls, message: str, path: Optional[str], cause: BaseException,
                   **kwargs: Any) -> 'XMLAccessorError':
        """
        Builds an instance from an underlying exception, taking the error
        position from the *position* attribute of XML syntax errors.
        """
        position = getattr(cause, 'position', None)
        if isinstance(position, tuple) and len(position) == 2:
            kwargs.setdefault('line', position[0])
            kwargs.setdefault('column', position[1])
        return cls(message, path, cause, **kwargs)


class XMLLoadError(XMLAccessorError):
    """The XML file is not accessible or not well-formed."""


class XMLValidationSetupError(XMLAccessorError):
    """The validating reader couldn't be configured or opened."""


class XMLValidationParseError(XMLAccessorError):
    """The XML document is not well-formed, found during the validating read."""


class XMLValidationIssuesError(XMLAccessorError):
    """The validating read has reported one or more schema issues."""


class XMLDocumentNotLoadedError(XMLAccessorError):
    """A query has been requested before a successful load."""


class XPathQueryError(XMLAccessorError):
    """An XPath expression is malformed, or it doesn't select the required nodes."""


class XMLAttributeMissingError(XPathQueryError):
    """The selected element doesn't have the requested attribute."""


__all__ = (
    'XMLAccessorException', 'XMLAccessorTypeError', 'XMLAccessorValueError',
    'XMLAccessorError', 'XMLLoadError',
    'XMLValidationSetupError', 'XMLValidationParseError',
    'XMLValidationIssuesError', 'XMLDocumentNotLoadedError',
    'XPathQueryError', 'XMLAttributeMissingError',
)
