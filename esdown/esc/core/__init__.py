"""
esdown.esc.core: shared core types used across the compiler.

Modules:
  - span: best-effort source locations
  - diagnostics: structured Diagnostic record
  - error_reporter: sticky-flag reporter and message formatting
  - session: per-compilation options and reporter ownership
"""

__all__ = [
    "span",
    "diagnostics",
    "error_reporter",
    "session",
]
