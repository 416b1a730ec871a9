"""
Subject index over a statement collection.

``build_subject_index`` is a pure function returning an immutable mapping
from subject term to the frozenset of statements with that subject. There is
no process-wide registry; a StatementGraph caches its own index.
"""

import logging
from collections import defaultdict
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, DefaultDict, FrozenSet, Iterable, Iterator, List, Set

from rdflib.term import Identifier

from ...shared.models import Statement, StatementGraph, to_term

logger = logging.getLogger(__name__)

_EMPTY: FrozenSet[Statement] = frozenset()


class SubjectIndex(Mapping):
    """Read-only mapping of subject term -> frozenset of Statements."""

    def __init__(self, entries: Mapping[Identifier, FrozenSet[Statement]]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def find(self, subject: Any) -> FrozenSet[Statement]:
        """All statements whose subject is ``subject``; empty when none match."""
        try:
            term = to_term(subject)
        except TypeError:
            return _EMPTY
        return self._entries.get(term, _EMPTY)

    def find_by_predicate(self, subject: Any, predicate: Any) -> List[Statement]:
        """Statements of ``subject`` with ``predicate``, in sort_key order."""
        predicate = to_term(predicate)
        matches = [st for st in self.find(subject) if st.predicate == predicate]
        matches.sort(key=Statement.sort_key)
        return matches

    def __getitem__(self, key: Identifier) -> FrozenSet[Statement]:
        return self._entries[key]

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SubjectIndex({len(self._entries)} subjects)"


def build_subject_index(statements: Iterable[Statement]) -> SubjectIndex:
    """Group statements by subject. Linear in the number of statements."""
    grouped: DefaultDict[Identifier, Set[Statement]] = defaultdict(set)
    count = 0
    for st in statements:
        grouped[st.subject].add(st)
        count += 1
    logger.debug(f"Built subject index: {len(grouped)} subjects over {count} statements")
    return SubjectIndex({subject: frozenset(group) for subject, group in grouped.items()})


def find(graph: Iterable[Statement], subject: Any) -> FrozenSet[Statement]:
    """
    All statements of ``graph`` with the given subject.

    Uses the cached index when ``graph`` is a StatementGraph, otherwise
    builds a transient one. Never fails; unknown subjects give an empty set.
    """
    if isinstance(graph, StatementGraph):
        return graph.index.find(subject)
    return build_subject_index(graph).find(subject)
