"""Minimalist Grammar features, lexical items, derivations, phases, workspaces and parsing."""

__version__ = "0.1.0"