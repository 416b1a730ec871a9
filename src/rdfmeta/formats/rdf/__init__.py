"""
RDF package - statement graph engine components.

Components:
- formats: RDFFormat registry (names, extensions, MIME types -> rdflib plugins)
- rdf_parser: RDFGraphParser, bytes/text/files -> StatementGraph
- rdf_writer: RDFGraphWriter, statements -> bytes/files
- subject_index: SubjectIndex, build_subject_index, find
- list_reifier: ListReifier, traverse_list, is_list_head
- list_inspector: ListShapeInspector and its report model
- graph_compare: graphs_equivalent, compare_graphs
"""

from .formats import FormatInfo, RDFFormat
from .rdf_parser import RDFGraphParser
from .rdf_writer import RDFGraphWriter
from .subject_index import SubjectIndex, build_subject_index, find
from .list_reifier import ListReifier, is_list_head, traverse_list
from .list_inspector import (
    IssueCategory,
    IssueSeverity,
    ListShapeInspector,
    ListShapeIssue,
    ListShapeReport,
)
from .graph_compare import compare_graphs, graphs_equivalent

__all__ = [
    'FormatInfo',
    'RDFFormat',
    'RDFGraphParser',
    'RDFGraphWriter',
    'SubjectIndex',
    'build_subject_index',
    'find',
    'ListReifier',
    'is_list_head',
    'traverse_list',
    'IssueCategory',
    'IssueSeverity',
    'ListShapeInspector',
    'ListShapeIssue',
    'ListShapeReport',
    'compare_graphs',
    'graphs_equivalent',
]
