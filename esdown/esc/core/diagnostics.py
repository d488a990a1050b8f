# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Diagnostic records kept by the error reporter.

One record per reported error or warning, so a driver can inspect what a
phase produced after polling the failure flag.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""A formatted message with its severity and (best-effort) location."""

	message: str
	severity: str = "error"
	# Phase label (scan, parse, lower, ...) copied from the reporter.
	phase: str | None = None
	span: Span = field(default_factory=Span)
	# Extra lines attached by the session, e.g. why a warning became an error.
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	@property
	def is_error(self) -> bool:
		return self.severity == "error"


__all__ = ["Diagnostic"]
