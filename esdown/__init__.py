# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
esdown package: ES6-to-ES5 lowering compiler.

Subpackages:
  esc.core: spans, diagnostics, error reporting, compilation sessions
  esc.syntax: tokens, token kinds, parse tree node catalog
  esc.codegen: synthetic parse tree factory used by lowering passes
"""

__all__ = ["esc"]
