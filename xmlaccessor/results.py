#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Result types returned by the accessor operations."""
from collections.abc import Sequence
from typing import Generic, Optional, TypeVar

from xmlaccessor.exceptions import XMLAccessorError, XMLValidationIssuesError
from xmlaccessor.issues import ValidationIssue

__all__ = ['Result', 'ValidationReport']

T = TypeVar('T')


class Result(Generic[T]):
    """
    The outcome of an accessor operation: a value or an error. The instance
    is true only if the operation has succeeded, so it can be checked like
    a boolean return value.

    :param value: the value produced by a successful operation.
    :param error: the error of a failed operation.
    """
    __slots__ = ('value', 'error')

    def __init__(self, value: Optional[T] = None,
                 error: Optional[XMLAccessorError] = None) -> None:
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value: Optional[T] = None) -> 'Result[T]':
        return cls(value)

    @classmethod
    def failure(cls, error: XMLAccessorError) -> 'Result[T]':
        return cls(error=error)

    def __repr__(self) -> str:
        if self.error is None:
            return '%s(value=%r)' % (self.__class__.__name__, self.value)
        return '%s(error=%r)' % (self.__class__.__name__, self.error)

    def __bool__(self) -> bool:
        return self.error is None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """The error message, an empty string if the operation has succeeded."""
        return '' if self.error is None else self.error.message

    def unwrap(self) -> Optional[T]:
        """Returns the value or raises the error of the operation."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or(self, default: T) -> T:
        return default if self.error is not None or self.value is None else self.value


class ValidationReport(Result[None]):
    """
    The outcome of a validation run, including the issues reported during
    the validating read, in the order they have been reported. For a fatal
    setup or parse error the issues are the ones collected before the failure.

    :param issues: the issues reported by the validation.
    :param error: the error of a failed validation.
    """
    __slots__ = ('issues',)

    def __init__(self, issues: Sequence[ValidationIssue] = (),
                 error: Optional[XMLAccessorError] = None) -> None:
        super().__init__(None, error)
        self.issues = list(issues)

    def __repr__(self) -> str:
        return '%s(ok=%r, errors=%d, warnings=%d)' % (
            self.__class__.__name__, self.ok, self.error_count, self.warning_count
        )

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @property
    def error_count(self) -> int:
        return sum(x.is_error for x in self.issues)

    @property
    def warning_count(self) -> int:
        return sum(x.is_warning for x in self.issues)

    @property
    def fatal(self) -> bool:
        """`True` if the validating read has been aborted by a setup or parse error."""
        return self.error is not None and not isinstance(self.error, XMLValidationIssuesError)
