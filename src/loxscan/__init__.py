# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""LoxScan - lexical scanner for the Lox scripting language."""

from loxscan.config import ConfigError, ReporterConfig, load_config, parse_config
from loxscan.diagnostics import ConsoleReporter, Diagnostic, DiagnosticCollector, ErrorReporter
from loxscan.scanner import KEYWORDS, Scanner, Token, TokenType, tokenize

__all__ = [
    "ConfigError",
    "ConsoleReporter",
    "Diagnostic",
    "DiagnosticCollector",
    "ErrorReporter",
    "KEYWORDS",
    "ReporterConfig",
    "Scanner",
    "Token",
    "TokenType",
    "load_config",
    "parse_config",
    "tokenize",
]
