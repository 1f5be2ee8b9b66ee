"""Diagnostic system for LocaleField.

Provides the exception hierarchy for configuration errors, structured
diagnostics with codes and hints, and the immutable Issue/Stats values
produced by translation audits.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ConfigError, LocaleFieldError
from .formatter import DiagnosticFormatter, OutputFormat
from .report import Issue, IssueKey, LocaleCompletion, Stats
from .templates import ErrorTemplate

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "Issue",
    "IssueKey",
    "LocaleCompletion",
    "LocaleFieldError",
    "OutputFormat",
    "Stats",
]
