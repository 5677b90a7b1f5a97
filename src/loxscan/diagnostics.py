# Copyright 2026 LoxScan Contributors
# SPDX-License-Identifier: Apache-2.0

"""Receivers for lexical diagnostics reported by the scanner.

The scanner never raises on malformed input. Instead it calls an
``ErrorReporter`` once per error with the line number and a message. The
host decides what to do with them: collect them for later inspection, print
them, or stop before parsing.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TextIO

from yachalk import ChalkFactory, ColorMode

if TYPE_CHECKING:
    from loxscan.config import ReporterConfig

# ###############
# Public Interface
# ###############


class ErrorReporter(Protocol):
    """Callable that receives one lexical error."""

    def __call__(self, line: int, message: str) -> None: ...


@dataclass(frozen=True)
class Diagnostic:
    """A single reported lexical error.

    Attributes:
        line: 1-based line number where the error was detected.
        message: Human-readable description of the error.
    """

    line: int
    message: str

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


@dataclass
class DiagnosticCollector:
    """Error reporter that records every diagnostic in order."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __call__(self, line: int, message: str) -> None:
        self.diagnostics.append(Diagnostic(line, message))

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def reset(self) -> None:
        """Forget all recorded diagnostics, e.g. before scanning the next source unit."""
        self.diagnostics.clear()


@dataclass
class ConsoleReporter(DiagnosticCollector):
    """Error reporter that prints each diagnostic on its own line as it arrives.

    Diagnostics are also recorded, so ``had_error`` works as for the collector.

    Attributes:
        stream: Output stream. ``None`` means ``sys.stderr`` looked up at report time.
        color: Render messages in red, whether or not the stream is a terminal.
    """

    stream: TextIO | None = None
    color: bool = False

    @classmethod
    def from_config(cls, config: ReporterConfig) -> ConsoleReporter:
        """Build a reporter from the ``diagnostics`` section of a config file."""
        stream = sys.stdout if config.stream == "stdout" else None
        return cls(stream=stream, color=config.color)

    def __call__(self, line: int, message: str) -> None:
        super().__call__(line, message)
        text = str(self.diagnostics[-1])
        if self.color:
            text = _CHALK.red(text)
        print(text, file=self.stream if self.stream is not None else sys.stderr)


# ################
# Implementation
# ################

# Colors unconditionally, independent of terminal detection.
_CHALK = ChalkFactory(ColorMode.Basic16)
