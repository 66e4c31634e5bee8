"""Diagnostic system for engine errors.

Provides structured error diagnostics with codes, hints and option context.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import ConfigurationError, IntlError, ValidationError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "IntlError",
    "OutputFormat",
    "ValidationError",
]
