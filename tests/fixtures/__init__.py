"""
Centralized test fixtures for the rdfmeta test suite.

This package provides reusable RDF content samples:
- N-Triples / N-Quads content
- Turtle records with lists
- Malformed list shapes (cycles, multiple rdf:first, missing rdf:rest)
- Named graph datasets

Usage:
    from fixtures import LIST_NT, RECORD_TTL, generate_list_ttl

Or use the pytest fixtures in conftest.py which import from here.
"""

from .rdf_fixtures import (
    EX,
    RDF_NS,

    # N-Triples / N-Quads content
    LIST_NT,
    SIMPLE_NT,
    NAMED_GRAPH_NQ,
    RELATIVE_NT,

    # Turtle content
    RECORD_TTL,
    RELATIVE_TTL,
    MALFORMED_TTL,
    EMPTY_TTL,

    # List shape content
    CYCLIC_TTL,
    SELF_CYCLE_TTL,
    MULTI_FIRST_TTL,
    MISSING_REST_TTL,
    REST_ONLY_TTL,

    # Dataset content
    NAMED_GRAPH_TRIG,

    generate_list_ttl,
)

__all__ = [
    "EX",
    "RDF_NS",
    "LIST_NT",
    "SIMPLE_NT",
    "NAMED_GRAPH_NQ",
    "RELATIVE_NT",
    "RECORD_TTL",
    "RELATIVE_TTL",
    "MALFORMED_TTL",
    "EMPTY_TTL",
    "CYCLIC_TTL",
    "SELF_CYCLE_TTL",
    "MULTI_FIRST_TTL",
    "MISSING_REST_TTL",
    "REST_ONLY_TTL",
    "NAMED_GRAPH_TRIG",
    "generate_list_ttl",
]
