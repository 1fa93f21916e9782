#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Translation of the diagnostic messages, based on GNU gettext catalogs."""
import gettext as _gettext
from pathlib import Path
from typing import Iterable, Optional, Union

__all__ = ['activate', 'deactivate', 'is_active', 'gettext', 'ngettext']

DOMAIN = 'xmlaccessor'
LOCALE_DIR = Path(__file__).parent.joinpath('locale')

_translation: Optional[_gettext.NullTranslations] = None


def activate(languages: Optional[Iterable[str]] = None,
             localedir: Union[None, str, Path] = None,
             fallback: bool = True) -> None:
    """
    Activate the translation of diagnostic messages.

    :param languages: list of language codes, for default the languages \
    of the environment (LANGUAGE, LC_ALL, LC_MESSAGES and LANG) are used.
    :param localedir: the directory containing the message catalogs, for \
    default the *locale* directory of the package.
    :param fallback: if `True` a missing catalog is not an error and the \
    messages are left untranslated.
    """
    global _translation

    _translation = _gettext.translation(
        domain=DOMAIN,
        localedir=LOCALE_DIR if localedir is None else localedir,
        languages=None if languages is None else list(languages),
        fallback=fallback,
    )


def deactivate() -> None:
    """Deactivate the translation of diagnostic messages."""
    global _translation
    _translation = None


def is_active() -> bool:
    return _translation is not None


def gettext(message: str) -> str:
    if _translation is None:
        return message
    return _translation.gettext(message)


def ngettext(singular: str, plural: str, n: int) -> str:
    if _translation is None:
        return singular if n == 1 else plural
    return _translation.ngettext(singular, plural, n)
