"""
esdown.esc.codegen: synthetic parse tree construction for lowering passes.

The whole catalog is importable from here:

  from esdown.esc import codegen as F
  F.create_scoped_block(F.create_block(stmt))

Modules:
  - normalize: name coercions and the list-or-arguments rule
  - factory: token builders and one builder per production
  - parameters: positional / rest parameter lists and forwarding arguments
  - derived: composite lowering idioms
"""

from esdown.esc.codegen.derived import *  # noqa: F401,F403
from esdown.esc.codegen.factory import *  # noqa: F401,F403
from esdown.esc.codegen.normalize import *  # noqa: F401,F403
from esdown.esc.codegen.parameters import *  # noqa: F401,F403
from esdown.esc.codegen import derived, factory, normalize, parameters

__all__ = (
    list(normalize.__all__)
    + list(factory.__all__)
    + list(parameters.__all__)
    + list(derived.__all__)
)
