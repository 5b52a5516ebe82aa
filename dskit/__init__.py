"""Classic data structures: compact matrices, polynomials, expression parsing, linked lists and binary trees."""

__version__ = "0.1.0"