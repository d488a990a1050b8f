# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Names the lowering passes rely on in generated code.

Runtime globals and members (`Object.defineProperty`, `fn.bind`, ...) plus the
reserved `$`-prefixed names used for synthetic locals and parameters.
"""

from __future__ import annotations

# Runtime objects and members
OBJECT = "Object"
BIND = "bind"
CALL = "call"
CREATE = "create"
DEFINE_PROPERTY = "defineProperty"
FREEZE = "freeze"
PREVENT_EXTENSIONS = "preventExtensions"
UNDEFINED = "undefined"

# Property descriptor keys
VALUE = "value"
ENUMERABLE = "enumerable"
CONFIGURABLE = "configurable"
WRITABLE = "writable"
GET = "get"
SET = "set"

# Generator state machine
STATE = "$state"

USE_STRICT = "use strict"

_PARAMETER_PREFIX = "$"


def parameter_name(index: int) -> str:
	"""Canonical name of the `index`-th synthetic parameter (`$0`, `$1`, ...)."""
	return f"{_PARAMETER_PREFIX}{index}"


__all__ = [
	"OBJECT",
	"BIND",
	"CALL",
	"CREATE",
	"DEFINE_PROPERTY",
	"FREEZE",
	"PREVENT_EXTENSIONS",
	"UNDEFINED",
	"VALUE",
	"ENUMERABLE",
	"CONFIGURABLE",
	"WRITABLE",
	"GET",
	"SET",
	"STATE",
	"USE_STRICT",
	"parameter_name",
]
