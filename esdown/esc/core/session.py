# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Per-compilation state.

A `CompilationSession` owns the error reporter for one compilation unit, so
the failure flag is never process-wide: two sessions compiling independent
files (possibly on different threads) never observe each other's errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .error_reporter import ErrorReporter


_PROMOTED_NOTE = "reported as an error because warnings_as_errors is set"


@dataclass(frozen=True)
class CompilerOptions:
	"""Options that affect how a session reports problems."""

	# Name used for diagnostics when a location has no file of its own.
	source_name: Optional[str] = None
	# Phase label stamped onto recorded diagnostics.
	phase: Optional[str] = None
	# Treat warnings as errors (they then set the failure flag).
	warnings_as_errors: bool = False


@dataclass
class CompilationSession:
	options: CompilerOptions = field(default_factory=CompilerOptions)
	reporter: ErrorReporter = field(init=False)

	def __post_init__(self) -> None:
		self.reporter = ErrorReporter(phase=self.options.phase)

	def _locate(self, location: Any) -> Any:
		if location is None:
			return self.options.source_name
		return location

	def report_error(self, location: Any, fmt: str, *args: Any) -> None:
		self.reporter.report_error(self._locate(location), fmt, *args)

	def report_warning(self, location: Any, fmt: str, *args: Any) -> None:
		location = self._locate(location)
		if self.options.warnings_as_errors:
			self.reporter.report_error(location, fmt, *args, notes=[_PROMOTED_NOTE])
		else:
			self.reporter.report_warning(location, fmt, *args)

	def had_error(self) -> bool:
		return self.reporter.had_error()

	def clear_error(self) -> None:
		self.reporter.clear_error()


__all__ = ["CompilerOptions", "CompilationSession"]
