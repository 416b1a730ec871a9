"""
RDF list shape inspection.

Reports malformed RDF collections as values instead of exceptions, so
callers binding record fields can decide how to treat odd input. The
reifier itself stays lenient (see ``list_reifier``); this module tells the
caller what that leniency covered up.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from rdflib import Literal

from ...constants import ProcessingLimits, RDFVocabulary
from ...core.exceptions import CyclicListError
from ...shared.models import Statement, StatementGraph, term_value, to_term
from .list_reifier import ListReifier
from .subject_index import SubjectIndex, build_subject_index

logger = logging.getLogger(__name__)


class IssueSeverity(Enum):
    """Severity levels for list shape issues."""
    INFO = "info"           # Not a list at all
    WARNING = "warning"     # Values extracted, shape is off
    ERROR = "error"         # Traversal fails or values are unreliable


class IssueCategory(Enum):
    """Kinds of list malformation."""
    NOT_A_LIST = "not_a_list"
    MISSING_FIRST = "missing_first"
    MULTIPLE_FIRST = "multiple_first"
    MISSING_REST = "missing_rest"
    MULTIPLE_REST = "multiple_rest"
    LITERAL_REST = "literal_rest"
    CYCLE = "cycle"
    LENGTH_LIMIT = "length_limit"


@dataclass
class ListShapeIssue:
    """A single malformation found on a list node."""
    category: IssueCategory
    severity: IssueSeverity
    node: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "node": self.node,
            "message": self.message,
        }


@dataclass
class ListShapeReport:
    """Result of inspecting one list head."""
    head: str
    length: int = 0
    values: Optional[List[str]] = None
    issues: List[ListShapeIssue] = field(default_factory=list)

    @property
    def is_well_formed(self) -> bool:
        return not self.issues

    @property
    def is_list(self) -> bool:
        return not any(i.category == IssueCategory.NOT_A_LIST for i in self.issues)

    def categories(self) -> List[IssueCategory]:
        return [i.category for i in self.issues]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "head": self.head,
            "length": self.length,
            "values": self.values,
            "is_well_formed": self.is_well_formed,
            "issues": [i.to_dict() for i in self.issues],
        }


class ListShapeInspector:
    """
    Inspect the shape of RDF collections.

    Walks the chain once, following the first ``rdf:rest`` (in sort_key
    order) at each node, and records every deviation from the
    one-first-one-rest-ending-in-nil shape.
    """

    def __init__(self, max_nodes: int = ProcessingLimits.MAX_LIST_NODES) -> None:
        self.max_nodes = max_nodes

    def inspect(self, graph: Iterable[Statement], head: Any) -> ListShapeReport:
        """Inspect the list at ``head``. Never raises for malformed data."""
        if isinstance(graph, StatementGraph):
            index = graph.index
        elif isinstance(graph, SubjectIndex):
            index = graph
        else:
            index = build_subject_index(graph)

        head_term = to_term(head)
        report = ListShapeReport(head=term_value(head_term))

        if head_term == RDFVocabulary.NIL:
            report.values = []
            return report

        def add(category: IssueCategory, severity: IssueSeverity, node: Any, message: str) -> None:
            report.issues.append(ListShapeIssue(category, severity, term_value(node), message))

        head_firsts = index.find_by_predicate(head_term, RDFVocabulary.FIRST)
        head_rests = index.find_by_predicate(head_term, RDFVocabulary.REST)
        if not head_firsts and not head_rests:
            add(IssueCategory.NOT_A_LIST, IssueSeverity.INFO, head_term,
                "Node has no rdf:first or rdf:rest statements")
            report.values = []
            return report

        visited = set()
        node = head_term
        while True:
            if node == RDFVocabulary.NIL:
                break
            if isinstance(node, Literal):
                break
            if node in visited:
                add(IssueCategory.CYCLE, IssueSeverity.ERROR, node,
                    "rdf:rest chain points back to an earlier node")
                break
            if len(visited) >= self.max_nodes:
                add(IssueCategory.LENGTH_LIMIT, IssueSeverity.ERROR, node,
                    f"List exceeds the limit of {self.max_nodes} nodes")
                break
            visited.add(node)

            firsts = index.find_by_predicate(node, RDFVocabulary.FIRST)
            rests = index.find_by_predicate(node, RDFVocabulary.REST)

            if not firsts:
                add(IssueCategory.MISSING_FIRST, IssueSeverity.WARNING, node,
                    "List node has no rdf:first; the sequence stops here")
            elif len(firsts) > 1:
                add(IssueCategory.MULTIPLE_FIRST, IssueSeverity.WARNING, node,
                    f"List node has {len(firsts)} rdf:first statements; all are visited")

            if not rests:
                add(IssueCategory.MISSING_REST, IssueSeverity.WARNING, node,
                    "List node has no rdf:rest; the chain does not end in rdf:nil")
                break
            if len(rests) > 1:
                add(IssueCategory.MULTIPLE_REST, IssueSeverity.ERROR, node,
                    f"List node has {len(rests)} rdf:rest statements; the chain branches")

            next_node = rests[0].object
            if isinstance(next_node, Literal):
                add(IssueCategory.LITERAL_REST, IssueSeverity.WARNING, node,
                    f"rdf:rest points to literal {next_node!r}")
                break
            node = next_node

        report.length = len(visited)
        try:
            report.values = ListReifier.traverse_list(index, head_term, max_nodes=self.max_nodes)
        except CyclicListError as e:
            logger.debug(f"List at {report.head} cannot be reified: {e}")
            report.values = None
            if not any(i.category in (IssueCategory.CYCLE, IssueCategory.LENGTH_LIMIT) for i in report.issues):
                add(IssueCategory.CYCLE, IssueSeverity.ERROR, head_term, str(e))

        if report.issues:
            logger.warning(
                f"RDF list at {report.head} is malformed: "
                f"{', '.join(sorted({i.category.value for i in report.issues}))}"
            )
        return report
