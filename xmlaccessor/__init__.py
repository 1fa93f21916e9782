#
# Copyright (c), 2016-2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from . import translation
from .exceptions import XMLAccessorException, XMLAccessorTypeError, \
    XMLAccessorValueError, XMLAccessorError, XMLLoadError, \
    XMLValidationSetupError, XMLValidationParseError, XMLValidationIssuesError, \
    XMLDocumentNotLoadedError, XPathQueryError, XMLAttributeMissingError
from .logger import logger, set_logging_level, logging_level
from .issues import ERROR, WARNING, ValidationIssue, IssueCollector
from .results import Result, ValidationReport
from .settings import AccessorSettings, accessor_settings
from .accessor import DocumentAccessor

__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2016-2026, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

__all__ = [
    'translation', 'XMLAccessorException', 'XMLAccessorTypeError',
    'XMLAccessorValueError', 'XMLAccessorError', 'XMLLoadError',
    'XMLValidationSetupError', 'XMLValidationParseError', 'XMLValidationIssuesError',
    'XMLDocumentNotLoadedError', 'XPathQueryError', 'XMLAttributeMissingError',
    'logger', 'set_logging_level', 'logging_level', 'ERROR', 'WARNING',
    'ValidationIssue', 'IssueCollector', 'Result', 'ValidationReport',
    'AccessorSettings', 'accessor_settings', 'DocumentAccessor',
]
