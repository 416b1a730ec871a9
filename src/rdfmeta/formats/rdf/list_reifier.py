"""
RDF list reification.

Turns an RDF collection (``rdf:first`` / ``rdf:rest`` / ``rdf:nil``) into an
ordered list of values, and tells whether a statement's object is a list
head.

The walk uses an explicit stack and an on-path set instead of recursion:
a node reached again while still on the current path is a cycle, and the
number of list nodes entered is capped by ``max_nodes``. Both fail with
CyclicListError.

Malformed shapes are tolerated, not repaired:
- a node without ``rdf:first`` ends the sequence (empty for the head)
- a node with several ``rdf:first`` or ``rdf:rest`` statements is visited
  once per match, matches taken in ``Statement.sort_key`` order, so the
  output is deterministic but may contain extra entries

Precondition: a node's ``rdf:first`` and ``rdf:rest`` statements share the
node as subject. The walk switches from ``first`` to ``rest`` on the same
subject; producers that split a node across subjects are not supported.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple

from rdflib import Literal
from rdflib.term import Identifier

from ...constants import ProcessingLimits, RDFVocabulary
from ...core.exceptions import CyclicListError
from ...core.validators import InputValidator
from ...shared.models import Statement, StatementGraph, term_value, to_term
from .subject_index import SubjectIndex, build_subject_index

logger = logging.getLogger(__name__)

Visitor = Callable[[str], None]

# Stack actions
_NODE = 0
_REST = 1
_EMIT = 2
_LEAVE = 3


def _index_of(graph: Iterable[Statement]) -> SubjectIndex:
    if isinstance(graph, SubjectIndex):
        return graph
    if isinstance(graph, StatementGraph):
        return graph.index
    return build_subject_index(graph)


class ListReifier:
    """Walks RDF collections over a subject index."""

    @staticmethod
    def traverse_list(
        graph: Iterable[Statement],
        subject: Any,
        prop: Any = RDFVocabulary.FIRST,
        visit: Optional[Visitor] = None,
        max_nodes: int = ProcessingLimits.MAX_LIST_NODES,
    ) -> List[str]:
        """
        Collect the values of the list starting at ``subject``.

        Args:
            graph: StatementGraph, SubjectIndex or any iterable of Statements
            subject: List head (term, IRI string or "_:label")
            prop: ``rdf:first`` to start at the head's element (the usual entry),
                ``rdf:rest`` to start at the node following the head
            visit: Optional callback invoked with each value in order
            max_nodes: Maximum number of list nodes entered

        Returns:
            Element values in chain order. Empty when ``subject`` has no list
            statements or is ``rdf:nil``.

        Raises:
            CyclicListError: If a node is revisited on the current path or
                more than ``max_nodes`` nodes are entered
            ValueError: If ``prop`` is neither ``rdf:first`` nor ``rdf:rest``
        """
        prop = to_term(prop)
        if prop not in (RDFVocabulary.FIRST, RDFVocabulary.REST):
            raise ValueError(f"List traversal property must be rdf:first or rdf:rest, got {prop}")
        max_nodes = InputValidator.validate_max_nodes(max_nodes)

        index = _index_of(graph)
        head = to_term(subject)

        values: List[str] = []
        on_path = set()
        entered = 0
        stack: List[Tuple[int, Any]] = [(_NODE if prop == RDFVocabulary.FIRST else _REST, head)]

        while stack:
            action, item = stack.pop()

            if action == _EMIT:
                values.append(item)
                if visit is not None:
                    visit(item)
                continue

            if action == _LEAVE:
                on_path.discard(item)
                continue

            if action == _REST:
                rests = index.find_by_predicate(item, RDFVocabulary.REST)
                if len(rests) > 1:
                    logger.warning(f"List node {item} has {len(rests)} rdf:rest statements; following all")
                for st in reversed(rests):
                    stack.append((_NODE, st.object))
                continue

            node = item
            if node == RDFVocabulary.NIL:
                continue
            firsts = index.find_by_predicate(node, RDFVocabulary.FIRST)
            if not firsts:
                if node != head:
                    logger.debug(f"List chain ends at {node} without rdf:nil")
                continue

            if node in on_path:
                logger.error(f"Cycle detected in RDF list at node {node} after {entered} nodes")
                raise CyclicListError(
                    f"RDF list starting at {head} revisits node {node}",
                    node=term_value(node),
                    steps=entered,
                )
            entered += 1
            if entered > max_nodes:
                logger.error(f"RDF list starting at {head} exceeds {max_nodes} nodes")
                raise CyclicListError(
                    f"RDF list starting at {head} exceeds the limit of {max_nodes} nodes",
                    node=term_value(node),
                    steps=entered,
                )

            if len(firsts) > 1:
                logger.warning(f"List node {node} has {len(firsts)} rdf:first statements; visiting all")

            on_path.add(node)
            stack.append((_LEAVE, node))
            for st in reversed(firsts):
                stack.append((_REST, node))
                stack.append((_EMIT, term_value(st.object)))

        logger.debug(f"Traversed list at {head}: {len(values)} values over {entered} nodes")
        return values

    @staticmethod
    def is_list_head(graph: Iterable[Statement], statement: Statement) -> bool:
        """
        True iff the statement's object has at least one ``rdf:first`` statement.

        Literal objects are never list heads. ``rdf:nil`` is not a list head
        either; it has no outgoing edges.
        """
        obj: Identifier = statement.object
        if isinstance(obj, Literal):
            return False
        return bool(_index_of(graph).find_by_predicate(obj, RDFVocabulary.FIRST))


traverse_list = ListReifier.traverse_list
is_list_head = ListReifier.is_list_head
