"""
Statement graph comparison.

Blank node labels are scoped to one document, so two parses of the same
data are compared as graphs (isomorphism), not as sets of labels.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional, Tuple

from rdflib import BNode, Graph
from rdflib.compare import isomorphic, to_isomorphic

from ...shared.models import Statement

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 10


def _is_ground(st: Statement) -> bool:
    return not any(isinstance(t, BNode) for t in (st.subject, st.object, st.context))


def _to_graph(statements: Iterable[Statement]) -> Graph:
    graph = Graph()
    for st in statements:
        graph.add(st.as_triple())
    return graph


def _group_by_context(statements: Iterable[Statement]) -> Dict[Optional[Any], List[Statement]]:
    groups: Dict[Optional[Any], List[Statement]] = defaultdict(list)
    for st in statements:
        groups[st.context].append(st)
    return groups


def graphs_equivalent(a: Iterable[Statement], b: Iterable[Statement], ignore_context: bool = True) -> bool:
    """
    True when both statement collections describe the same graph.

    Blank nodes are matched up to relabelling. With ``ignore_context`` the
    graph names are dropped before comparing; otherwise each named graph is
    compared on its own (graphs named by blank nodes are matched by their
    canonical hash).
    """
    set_a, set_b = set(a), set(b)
    if ignore_context:
        return isomorphic(_to_graph(set_a), _to_graph(set_b))

    groups_a = _group_by_context(set_a)
    groups_b = _group_by_context(set_b)

    named_a = {c for c in groups_a if not isinstance(c, BNode)}
    named_b = {c for c in groups_b if not isinstance(c, BNode)}
    if named_a != named_b:
        return False
    for name in named_a:
        if not isomorphic(_to_graph(groups_a[name]), _to_graph(groups_b[name])):
            return False

    def anonymous_hashes(groups: Dict[Optional[Any], List[Statement]]) -> List[int]:
        return sorted(
            to_isomorphic(_to_graph(sts)).internal_hash()
            for name, sts in groups.items() if isinstance(name, BNode)
        )

    return anonymous_hashes(groups_a) == anonymous_hashes(groups_b)


def _n3_key(triple: Tuple[Any, ...]) -> Tuple[str, ...]:
    return tuple(t.n3() for t in triple)


def compare_graphs(a: Iterable[Statement], b: Iterable[Statement]) -> Dict[str, Any]:
    """
    Compare two statement collections and return differences.

    Returns:
        Dict with:
        - matches: bool, graphs are isomorphic (graph names ignored)
        - count_a / count_b: number of distinct statements
        - missing: ground triples in ``a`` but not in ``b`` (sample, N-Triples text)
        - extra: ground triples in ``b`` but not in ``a`` (sample)
        - missing_count / extra_count
        - blank_nodes: True if either side has blank nodes (the diff covers ground triples only)
    """
    set_a, set_b = set(a), set(b)
    matches = graphs_equivalent(set_a, set_b)

    ground_a = {st.as_triple() for st in set_a if _is_ground(st)}
    ground_b = {st.as_triple() for st in set_b if _is_ground(st)}
    missing = sorted(ground_a - ground_b, key=_n3_key)
    extra = sorted(ground_b - ground_a, key=_n3_key)

    def sample(triples: List[Tuple[Any, ...]]) -> List[str]:
        return [" ".join(_n3_key(triple)) + " ." for triple in triples[:SAMPLE_SIZE]]

    result = {
        "matches": matches,
        "count_a": len(set_a),
        "count_b": len(set_b),
        "missing_count": len(missing),
        "extra_count": len(extra),
        "missing": sample(missing),
        "extra": sample(extra),
        "blank_nodes": any(not _is_ground(st) for st in set_a | set_b),
    }
    if not matches:
        logger.info(f"Graphs differ: {len(missing)} missing, {len(extra)} extra ground triples")
    return result
