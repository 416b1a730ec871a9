"""
Shared data models for the rdfmeta engine.

Usage:
    from rdfmeta.shared.models import Statement, StatementGraph, to_term
"""

from .statement import (
    BNODE_PREFIX,
    ObjectTerm,
    Statement,
    StatementGraph,
    SubjectTerm,
    term_value,
    to_term,
)

__all__ = [
    "BNODE_PREFIX",
    "ObjectTerm",
    "Statement",
    "StatementGraph",
    "SubjectTerm",
    "term_value",
    "to_term",
]
