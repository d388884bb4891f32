"""Lexing, syntax checking, expansion and parsing of shell command lines."""

__version__ = "0.1.0"
__all__ = ["cli", "debug", "environment", "expand", "parser", "syntax", "tokens"]