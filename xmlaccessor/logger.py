#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any, Optional, TypeVar, Union

from xmlaccessor.exceptions import XMLAccessorTypeError, XMLAccessorValueError
from xmlaccessor.translation import gettext as _

logger = logging.getLogger('xmlaccessor')

LOG_LEVELS = {'DEBUG', 'INFO', 'WARN', 'WARNING', 'ERROR', 'CRITICAL'}

LogLevelType = Union[str, int]


def get_logging_level(level: LogLevelType) -> int:
    """Returns the numeric logging level for a level name or number."""
    if isinstance(level, bool):
        pass
    elif isinstance(level, int):
        return level
    elif isinstance(level, str):
        _level = level.strip().upper()
        if _level not in LOG_LEVELS:
            raise XMLAccessorValueError(
                _("{!r} is not a valid loglevel").format(level)
            )
        return int(getattr(logging, _level))

    msg = _("invalid type {!r} for a loglevel, must be a string or an integer")
    raise XMLAccessorTypeError(msg.format(type(level)))


def set_logging_level(level: LogLevelType) -> None:
    """set logging level of xmlaccessor's logger."""
    logger.setLevel(get_logging_level(level))


@contextmanager
def logging_level(level: Optional[LogLevelType]) -> Iterator[None]:
    """
    A context manager that sets the logging level of xmlaccessor's logger
    and restores the previous level at exit. Does nothing if *level* is `None`.
    """
    if level is None:
        yield
        return

    current_level = logger.level
    set_logging_level(level)
    try:
        yield
    finally:
        logger.setLevel(current_level)


RT = TypeVar('RT')


def logged(func: Callable[..., RT]) -> Callable[..., RT]:
    """
    A decorator for activating a logging level for a method call. The optional
    keyword argument 'loglevel' is removed from the keyword arguments and used
    for setting the logging level during the call of the decorated method.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> RT:
        with logging_level(kwargs.pop('loglevel', None)):
            return func(*args, **kwargs)

    return wrapper
