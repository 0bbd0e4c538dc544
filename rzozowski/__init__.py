"""Regular expressions matched with Brzozowski derivatives."""

__version__ = "0.1.3"
__all__ = ["lexer", "parser", "ranges", "regex"]