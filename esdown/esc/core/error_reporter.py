# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error reporter used by the scanner, parser and driver.

The reporter is a sink with a sticky failure flag: `report_error` flips the
flag and `clear_error` is the only thing that resets it. Reporting never
raises and never stops the caller; the driver polls `had_error()` between
phases and decides whether to keep going.

Messages use a tiny printf subset: `%s` is replaced by the next argument and
`%%` by a literal percent sign. Anything else that looks like a placeholder
(including a `%s` with no argument left) is kept verbatim.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Optional

from .diagnostics import Diagnostic
from .span import Span

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"%.")


def _has_location(location: Any) -> bool:
	if location is None:
		return False
	if isinstance(location, Span):
		return not location.is_unknown()
	return bool(location)


def format_message(location: Any, text: str, args: Optional[Iterable[Any]] = None) -> str:
	"""
	Format a diagnostic message.

	`location` is prepended as `"<location>: "` when present; pass `None` to
	leave it out. `args` populate the `%s` placeholders in order.
	"""
	values = iter(args if args is not None else ())

	def _substitute(match: re.Match[str]) -> str:
		placeholder = match.group(0)
		if placeholder == "%s":
			try:
				return str(next(values))
			except StopIteration:
				return placeholder
		if placeholder == "%%":
			return "%"
		return placeholder

	text = _PLACEHOLDER.sub(_substitute, text)
	if _has_location(location):
		text = f"{location}: {text}"
	return text


class ErrorReporter:
	"""Collects errors and warnings for one compilation."""

	def __init__(self, *, phase: str | None = None) -> None:
		self.phase = phase
		self.diagnostics: List[Diagnostic] = []
		self._had_error = False

	def report_error(self, location: Any, fmt: str, *args: Any, notes: Optional[List[str]] = None) -> None:
		self._had_error = True
		self._report(location, "error", fmt, args, notes)

	def report_warning(self, location: Any, fmt: str, *args: Any, notes: Optional[List[str]] = None) -> None:
		self._report(location, "warning", fmt, args, notes)

	def had_error(self) -> bool:
		return self._had_error

	def clear_error(self) -> None:
		self._had_error = False

	@property
	def errors(self) -> List[Diagnostic]:
		return [d for d in self.diagnostics if d.is_error]

	@property
	def warnings(self) -> List[Diagnostic]:
		return [d for d in self.diagnostics if d.severity == "warning"]

	def _report(
		self,
		location: Any,
		severity: str,
		fmt: str,
		args: tuple,
		notes: Optional[List[str]],
	) -> None:
		message = format_message(None, fmt, args)
		span = Span.from_loc(location)
		self.diagnostics.append(
			Diagnostic(
				message=message,
				severity=severity,
				phase=self.phase,
				span=span,
				notes=list(notes or ()),
			)
		)
		rendered = format_message(location, "%s", [message])
		if severity == "error":
			logger.error(rendered)
		else:
			logger.warning(rendered)


__all__ = ["ErrorReporter", "format_message"]
