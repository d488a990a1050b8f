"""
esdown.esc.syntax: the lexical and tree model shared by every phase.

Modules:
  - token_type: TokenType enum
  - tokens: Token / IdentifierToken / LiteralToken
  - literal_reader: decode literal token text (lark grammar in literal.lark)
  - trees: parse tree node catalog
  - predefined: runtime and synthetic names used by generated code
"""

__all__ = [
    "token_type",
    "tokens",
    "literal_reader",
    "trees",
    "predefined",
]
