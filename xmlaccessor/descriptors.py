#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Descriptors for validated settings options."""
from collections.abc import Iterable
from typing import Any, cast, Generic, Optional, TypeVar

from xmlaccessor.exceptions import XMLAccessorTypeError, XMLAccessorValueError
from xmlaccessor.translation import gettext as _

__all__ = ['Option', 'BooleanOption', 'IntOption', 'StringOption', 'ChoiceOption']

T = TypeVar('T')


class Option(Generic[T]):
    """
    A descriptor for a settings option. The value is validated at each
    assignment and stored in a protected attribute of the instance.

    :param default: The default value of the option.
    """
    __slots__ = ('_name', '_owner', '_default')

    def __init__(self, *, default: T) -> None:
        self._default = default

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self._name = f'_{name}'
        self._owner = owner

    def __str__(self) -> str:
        return _('option {!r}').format(self._name[1:])

    def __get__(self, instance: Any, owner: type[Any]) -> T:
        try:
            return cast(T, getattr(instance, self._name))
        except AttributeError:
            return self._default

    def __set__(self, instance: Any, value: Any) -> None:
        setattr(instance, self._name, self.validated_value(value))

    def validated_value(self, value: Any) -> T:
        return cast(T, value)

    def _type_error(self, value: Any, types: Any) -> XMLAccessorTypeError:
        msg = _("invalid type {!r} for {}, must be of type {!r}")
        return XMLAccessorTypeError(msg.format(type(value), self, types))

    def _validate_choice(self, value: T, choices: Iterable[T]) -> None:
        if value not in choices:
            msg = _("invalid value {!r} for {}: must be one of {}")
            raise XMLAccessorValueError(msg.format(value, self, tuple(choices)))

    def _validate_minimum(self, value: T, min_value: Any) -> None:
        if value < min_value:
            msg = _("the value of {} must be greater or equal than {}")
            raise XMLAccessorValueError(msg.format(self, min_value))


class BooleanOption(Option[bool]):
    def validated_value(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise self._type_error(value, bool)


class StringOption(Option[str]):
    def validated_value(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        raise self._type_error(value, str)


class ChoiceOption(StringOption):
    """A string option restricted to a set of admitted values."""
    __slots__ = ('_choices',)

    def __init__(self, *, default: str, choices: Iterable[str]) -> None:
        self._choices = tuple(choices)
        super().__init__(default=default)

    def validated_value(self, value: Any) -> str:
        value = super().validated_value(value)
        self._validate_choice(value, self._choices)
        return value


class IntOption(Option[int]):
    __slots__ = ('_min_value',)

    def __init__(self, *, default: int, min_value: Optional[int] = None) -> None:
        self._min_value = min_value
        super().__init__(default=default)

    def validated_value(self, value: Any) -> int:
        if not isinstance(value, int) or isinstance(value, bool):
            raise self._type_error(value, int)
        elif self._min_value is not None:
            self._validate_minimum(value, self._min_value)
        return value
