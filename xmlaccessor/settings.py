#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Settings for XML document accessors."""
import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from elementpath import XPath1Parser, XPath2Parser
from lxml import etree
from xmlschema import XMLSchema10, XMLSchema11, XMLSchemaBase

from xmlaccessor.exceptions import XMLAccessorTypeError
from xmlaccessor.descriptors import Option, BooleanOption, ChoiceOption, IntOption
from xmlaccessor.translation import gettext as _

__all__ = ['AccessorSettings', 'accessor_settings',
           'DEFUSE_MODES', 'SECURITY_MODES', 'XSD_VERSIONS', 'XPATH_VERSIONS']

DEFUSE_MODES = ('never', 'remote', 'nonlocal', 'always')
SECURITY_MODES = ('all', 'remote', 'local', 'sandbox', 'none')
XSD_VERSIONS = ('1.0', '1.1')
XPATH_VERSIONS = ('1.0', '2.0')

IterParseType = Callable[..., Any]
LocationsType = Union[Mapping[str, Union[str, list[str]]], list[tuple[str, str]]]


class BaseUrlOption(Option[Optional[str]]):
    """The base URL used for completing relative schema locations."""
    def validated_value(self, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        elif isinstance(value, Path):
            return str(value)
        elif isinstance(value, bytes):
            return value.decode()
        raise self._type_error(value, (str, bytes, Path))


class LocationsOption(Option[Optional[LocationsType]]):
    """Additional schema location hints, a mapping or a list of couples."""
    def validated_value(self, value: Any) -> Optional[LocationsType]:
        if value is None:
            return None
        elif isinstance(value, Mapping):
            return dict(value)
        elif isinstance(value, (list, tuple)) and \
                all(isinstance(x, tuple) and len(x) == 2 for x in value):
            return list(value)
        raise self._type_error(value, (dict, list))


class NamespacesOption(Option[Optional[dict[str, str]]]):
    """Additional namespace prefixes for XPath expressions."""
    def validated_value(self, value: Any) -> Optional[dict[str, str]]:
        if value is None:
            return None
        elif isinstance(value, Mapping) and \
                all(isinstance(k, str) and isinstance(v, str) for k, v in value.items()):
            return dict(value)
        raise self._type_error(value, dict)


class IterParseOption(Option[IterParseType]):
    def validated_value(self, value: Any) -> IterParseType:
        if value is None:
            return self._default
        elif callable(value):
            return value
        msg = _("invalid type {!r} for {}, must be a callable object or None")
        raise XMLAccessorTypeError(msg.format(type(value), self))


@dataclass
class AccessorSettings:
    """Settings for loading, validating and querying XML documents."""

    base_url: Option[Optional[str]] = BaseUrlOption(default=None)
    """
    The base URL used for completing relative schema locations. For default
    the directory of the XML document is used.
    """

    allow: Option[str] = ChoiceOption(default='all', choices=SECURITY_MODES)
    """
    The security mode for accessing resource locations. Can be 'all', 'remote',
    'local', 'sandbox' or 'none'. The 'sandbox' mode requires *base_url*.
    """

    defuse: Option[str] = ChoiceOption(default='remote', choices=DEFUSE_MODES)
    """When to defuse XML data."""

    timeout: Option[int] = IntOption(default=300, min_value=1)
    """The timeout in seconds for accessing remote resources."""

    xsd_version: Option[str] = ChoiceOption(default='1.0', choices=XSD_VERSIONS)
    """The XSD version used for building schemas."""

    xpath_version: Option[str] = ChoiceOption(default='1.0', choices=XPATH_VERSIONS)
    """The XPath version used for evaluating query expressions."""

    use_location_hints: Option[bool] = BooleanOption(default=True)
    """Honor xsi:schemaLocation and xsi:noNamespaceSchemaLocation hints."""

    process_inline_schemas: Option[bool] = BooleanOption(default=True)
    """Honor schemas declared inline, as child elements of the document root."""

    report_warnings: Option[bool] = BooleanOption(default=True)
    """Report validation warnings in addition to errors."""

    locations: Option[Optional[LocationsType]] = LocationsOption(default=None)
    """Additional schema location hints, used before the ones of the document."""

    namespaces: Option[Optional[dict[str, str]]] = NamespacesOption(default=None)
    """Additional namespace prefixes available to XPath expressions."""

    iterparse: Option[IterParseType] = IterParseOption(default=etree.iterparse)
    """
    The callable that returns the iterator parser used for reading XML documents.
    For default lxml's parser is used, that preserves namespace declarations and
    line numbers.
    """

    @classmethod
    def get_settings(cls, **kwargs: Any) -> 'AccessorSettings':
        return cls(**kwargs)

    def copy(self, **kwargs: Any) -> 'AccessorSettings':
        """Returns a copy of the settings, replacing the options provided."""
        return dataclasses.replace(self, **kwargs)

    def set_options(self, **kwargs: Any) -> None:
        """Set options for settings object."""
        type(self)(**kwargs)
        for name, value in kwargs.items():
            setattr(self, name, value)

    def reset(self) -> None:
        """Reset settings to default values."""
        self.set_options(**{
            f.name: f.default for f in dataclasses.fields(self)
        })

    def get_resource_kwargs(self, base_url: Optional[str] = None) -> dict[str, Any]:
        """Keyword arguments for building XML resource instances."""
        return {
            'base_url': self.base_url or base_url,
            'allow': self.allow,
            'defuse': self.defuse,
            'timeout': self.timeout,
            'iterparse': self.iterparse,
        }

    def get_schema_kwargs(self, base_url: Optional[str] = None) -> dict[str, Any]:
        """Keyword arguments for building schema instances."""
        return {
            'base_url': self.base_url or base_url,
            'allow': self.allow,
            'defuse': self.defuse,
            'timeout': self.timeout,
        }

    def get_schema_class(self) -> type[XMLSchemaBase]:
        return XMLSchema10 if self.xsd_version == '1.0' else XMLSchema11

    def get_xpath_parser(self) -> type[XPath1Parser]:
        return XPath1Parser if self.xpath_version == '1.0' else XPath2Parser


accessor_settings = AccessorSettings()  # Defaults for new accessors
