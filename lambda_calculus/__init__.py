"""The untyped lambda calculus: terms, parsing, beta reduction and tuples."""

__version__ = "0.1.0"
__all__ = ["term", "parser", "reduction", "tuples"]