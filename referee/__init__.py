"""Syntax tree, type model, symbol table and canonicalisation for a temporal-logic specification language."""

__version__ = "0.1.0"