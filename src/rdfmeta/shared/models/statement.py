"""
Statement and StatementGraph data models.

A Statement is an immutable RDF triple plus an optional graph name. A
StatementGraph is an immutable set of Statements; it is what the parser
produces and what the writer, the subject index and the list reifier consume.

Usage:
    from rdfmeta.shared.models import Statement, StatementGraph, to_term

    st = Statement("urn:x", "urn:p", Literal("a"))
    graph = StatementGraph([st])
    assert st in graph
"""

from collections.abc import Set
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING, Any, FrozenSet, Iterable, Iterator, List,
    Optional, Tuple, Union,
)

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.term import Identifier

if TYPE_CHECKING:
    from ...formats.rdf.subject_index import SubjectIndex

SubjectTerm = Union[URIRef, BNode]
ObjectTerm = Union[URIRef, BNode, Literal]

BNODE_PREFIX = "_:"


def to_term(value: Any) -> Identifier:
    """
    Coerce a user supplied identifier into an rdflib term.

    rdflib terms pass through unchanged, ``"_:label"`` becomes a blank node
    and any other string becomes a URI reference.

    Raises:
        TypeError: If value is neither a term nor a string
    """
    if isinstance(value, Identifier):
        return value
    if not isinstance(value, str):
        raise TypeError(f"RDF term must be string or rdflib term, got {type(value).__name__}")
    if value.startswith(BNODE_PREFIX):
        return BNode(value[len(BNODE_PREFIX):])
    return URIRef(value)


def term_value(term: Identifier) -> str:
    """Plain string value of a term: IRI text, blank node id or literal lexical form."""
    return str(term)


@dataclass(frozen=True)
class Statement:
    """An RDF statement with an optional graph name (``context``)."""
    subject: SubjectTerm
    predicate: URIRef
    object: ObjectTerm
    context: Optional[SubjectTerm] = None

    def __post_init__(self) -> None:
        subject = to_term(self.subject)
        predicate = to_term(self.predicate)
        obj = to_term(self.object)
        context = to_term(self.context) if self.context is not None else None

        if isinstance(subject, Literal):
            raise TypeError(f"Statement subject cannot be a literal: {subject!r}")
        if not isinstance(predicate, URIRef):
            raise TypeError(f"Statement predicate must be a URI, got {predicate!r}")
        if context is not None and isinstance(context, Literal):
            raise TypeError(f"Statement context cannot be a literal: {context!r}")

        # frozen dataclass: normalise coerced terms in place
        object.__setattr__(self, "subject", subject)
        object.__setattr__(self, "predicate", predicate)
        object.__setattr__(self, "object", obj)
        object.__setattr__(self, "context", context)

    @classmethod
    def from_rdflib(cls, triple: Tuple[Any, Any, Any], context: Optional[Any] = None) -> "Statement":
        s, p, o = triple
        return cls(s, p, o, context)

    @property
    def subject_value(self) -> str:
        return term_value(self.subject)

    @property
    def predicate_value(self) -> str:
        return term_value(self.predicate)

    @property
    def object_value(self) -> str:
        return term_value(self.object)

    def as_triple(self) -> Tuple[SubjectTerm, URIRef, ObjectTerm]:
        return (self.subject, self.predicate, self.object)

    def sort_key(self) -> Tuple[str, str, str, str]:
        """Total ordering key used wherever output must be deterministic."""
        return (
            self.subject.n3(),
            self.predicate.n3(),
            self.object.n3(),
            self.context.n3() if self.context is not None else "",
        )

    def __str__(self) -> str:
        parts = [t.n3() for t in self.as_triple()]
        if self.context is not None:
            parts.append(self.context.n3())
        return " ".join(parts) + " ."


class StatementGraph:
    """
    Immutable set of Statements.

    Duplicates collapse; insertion order carries no meaning. The subject
    index is built lazily on first use and cached for the lifetime of the
    instance. Concurrent first readers may both build it; the results are
    equal and the last write wins.
    """

    def __init__(self, statements: Iterable[Statement] = ()) -> None:
        self._statements: FrozenSet[Statement] = frozenset(statements)
        self._index: Optional["SubjectIndex"] = None

    @property
    def statements(self) -> FrozenSet[Statement]:
        return self._statements

    @property
    def index(self) -> "SubjectIndex":
        """Subject index over this graph, built once."""
        if self._index is None:
            from ...formats.rdf.subject_index import build_subject_index
            self._index = build_subject_index(self._statements)
        return self._index

    def contexts(self) -> FrozenSet[SubjectTerm]:
        """Named graphs present in this graph (the default graph is omitted)."""
        return frozenset(st.context for st in self._statements if st.context is not None)

    def sorted(self) -> List[Statement]:
        return sorted(self._statements, key=Statement.sort_key)

    def to_rdflib(self) -> Graph:
        """Copy the statements into an rdflib Graph, dropping graph names."""
        graph = Graph()
        for st in self.sorted():
            graph.add(st.as_triple())
        return graph

    def __iter__(self) -> Iterator[Statement]:
        return iter(self._statements)

    def __len__(self) -> int:
        return len(self._statements)

    def __contains__(self, item: object) -> bool:
        return item in self._statements

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StatementGraph):
            return self._statements == other._statements
        if isinstance(other, Set):
            return self._statements == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._statements)

    def __repr__(self) -> str:
        return f"StatementGraph({len(self._statements)} statements)"
