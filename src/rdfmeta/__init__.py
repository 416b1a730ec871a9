"""
rdfmeta - RDF statement graph engine.

Parses RDF documents into immutable statement graphs, re-serializes them in
any rdflib syntax and reifies RDF collections (rdf:first / rdf:rest) into
ordered value lists for record binding.

Usage:
    from rdfmeta import convert, extract_list, extract_property_values

    turtle = convert(nt_bytes, "nt", "turtle")
"""

from .converter import (
    RDFConverter,
    convert,
    extract_list,
    extract_property,
    extract_property_values,
)
from .core import (
    CyclicListError,
    EngineConfig,
    ParseError,
    RDFMetaError,
    SerializationError,
    UnsupportedFormatError,
    load_config,
    setup_logging,
)
from .formats.rdf import (
    ListShapeInspector,
    ListShapeReport,
    RDFFormat,
    RDFGraphParser,
    RDFGraphWriter,
    SubjectIndex,
    build_subject_index,
    compare_graphs,
    find,
    graphs_equivalent,
    is_list_head,
    traverse_list,
)
from .shared.models import Statement, StatementGraph, to_term

__version__ = "0.1.0"

__all__ = [
    # Facade
    'RDFConverter',
    'convert',
    'extract_list',
    'extract_property',
    'extract_property_values',
    # Models
    'Statement',
    'StatementGraph',
    'to_term',
    # Components
    'RDFFormat',
    'RDFGraphParser',
    'RDFGraphWriter',
    'SubjectIndex',
    'build_subject_index',
    'find',
    'traverse_list',
    'is_list_head',
    'ListShapeInspector',
    'ListShapeReport',
    'graphs_equivalent',
    'compare_graphs',
    # Errors
    'RDFMetaError',
    'ParseError',
    'SerializationError',
    'CyclicListError',
    'UnsupportedFormatError',
    # Config
    'EngineConfig',
    'load_config',
    'setup_logging',
]
