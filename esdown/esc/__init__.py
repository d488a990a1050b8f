# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
esdown compiler package (`esc`).

The scanner, parser and printer live outside this tree; `esc` provides the
shared syntax model and the factory lowering passes use to build trees.
"""

__all__ = ["core", "syntax", "codegen"]
