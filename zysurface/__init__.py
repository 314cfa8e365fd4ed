"""Surface syntax for the Zydeco language: spans, lexing, syntax trees, parse errors and scoped syntax."""

__version__ = "0.1.0"