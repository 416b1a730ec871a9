"""
Tests for RDF list reification.

Covers well formed lists, cycle detection, the node budget, malformed
shapes and list head detection.
"""

import pytest
from rdflib import BNode, Literal, RDF, URIRef

from rdfmeta.core.exceptions import CyclicListError
from rdfmeta.formats.rdf import (
    ListReifier,
    RDFGraphParser,
    is_list_head,
    traverse_list,
)
from rdfmeta.shared.models import Statement, StatementGraph

from fixtures import (
    CYCLIC_TTL,
    LIST_NT,
    EX,
    MISSING_REST_TTL,
    MULTI_FIRST_TTL,
    REST_ONLY_TTL,
    SELF_CYCLE_TTL,
    generate_list_ttl,
)


def parse_ttl(data):
    return RDFGraphParser.parse(data, "turtle", base_uri=EX)


def chain(values, prefix="urn:n"):
    """Statements of a well formed list with named cells urn:n0, urn:n1, ..."""
    statements = []
    for i, value in enumerate(values):
        node = URIRef(f"{prefix}{i}")
        rest = URIRef(f"{prefix}{i + 1}") if i + 1 < len(values) else RDF.nil
        statements.append(Statement(node, RDF.first, Literal(value)))
        statements.append(Statement(node, RDF.rest, rest))
    return statements


@pytest.mark.unit
class TestTraverseList:
    """Test value extraction from well formed lists."""

    def test_blank_node_list_via_pointing_statement(self, list_graph):
        (pointer,) = list_graph.index.find("urn:x")
        assert traverse_list(list_graph, pointer.object) == ["a", "b"]

    def test_blank_node_head_by_document_label(self, list_graph):
        assert traverse_list(list_graph, "_:l1") == ["a", "b"]
        assert traverse_list(list_graph, "_:l2") == ["b"]

    def test_blank_node_head_in_nquads(self):
        graph = RDFGraphParser.parse(LIST_NT, "nquads")
        assert traverse_list(graph, "_:l1", RDF.first) == ["a", "b"]

    def test_named_cells(self, record_graph):
        assert traverse_list(record_graph, EX + "authorList") == ["Ada", "Grace"]

    def test_plain_statement_list(self):
        assert traverse_list(chain(["x", "y", "z"]), "urn:n0") == ["x", "y", "z"]

    def test_single_element(self):
        assert traverse_list(chain(["only"]), "urn:n0") == ["only"]

    def test_nil_is_empty_list(self, list_graph):
        assert traverse_list(list_graph, RDF.nil) == []

    def test_non_list_subject_is_empty(self, list_graph):
        assert traverse_list(list_graph, "urn:x") == []
        assert traverse_list(list_graph, "urn:unknown") == []

    def test_rest_starts_after_head_element(self):
        assert traverse_list(chain(["x", "y", "z"]), "urn:n0", RDF.rest) == ["y", "z"]

    def test_invalid_property(self):
        with pytest.raises(ValueError):
            traverse_list(chain(["x"]), "urn:n0", "urn:p")

    def test_visit_callback_sees_values_in_order(self):
        seen = []
        values = traverse_list(chain(["x", "y"]), "urn:n0", visit=seen.append)
        assert seen == values == ["x", "y"]

    def test_literal_values_are_lexical(self):
        statements = [
            Statement("urn:h", RDF.first, Literal(42)),
            Statement("urn:h", RDF.rest, RDF.nil),
        ]
        assert traverse_list(statements, "urn:h") == ["42"]

    def test_resource_values_are_iris(self):
        statements = [
            Statement("urn:h", RDF.first, URIRef("urn:item")),
            Statement("urn:h", RDF.rest, RDF.nil),
        ]
        assert traverse_list(statements, "urn:h") == ["urn:item"]

    def test_long_list_is_not_recursive(self):
        values = [f"v{i}" for i in range(5000)]
        assert traverse_list(chain(values), "urn:n0") == values

    def test_generated_turtle_list(self):
        graph = parse_ttl(generate_list_ttl(50))
        assert traverse_list(graph, EX + "n0") == [f"v{i}" for i in range(50)]

    def test_traversal_is_deterministic(self, list_graph):
        (pointer,) = list_graph.index.find("urn:x")
        runs = {tuple(traverse_list(list_graph, pointer.object)) for _ in range(5)}
        assert runs == {("a", "b")}


@pytest.mark.unit
class TestCycles:
    """Test cycle detection and the node budget."""

    def test_two_node_cycle(self):
        graph = parse_ttl(CYCLIC_TTL)
        with pytest.raises(CyclicListError) as exc_info:
            traverse_list(graph, EX + "c1")
        assert exc_info.value.node == EX + "c1"
        assert exc_info.value.steps == 2

    def test_self_cycle(self):
        graph = parse_ttl(SELF_CYCLE_TTL)
        with pytest.raises(CyclicListError):
            traverse_list(graph, EX + "loop")

    def test_cycle_entered_mid_list(self):
        graph = parse_ttl(CYCLIC_TTL)
        with pytest.raises(CyclicListError):
            traverse_list(graph, EX + "c2")

    def test_visit_called_before_cycle_detected(self):
        graph = parse_ttl(CYCLIC_TTL)
        seen = []
        with pytest.raises(CyclicListError):
            traverse_list(graph, EX + "c1", visit=seen.append)
        assert seen == ["a", "b"]

    def test_node_budget_exceeded(self):
        with pytest.raises(CyclicListError, match="limit"):
            traverse_list(chain([str(i) for i in range(20)]), "urn:n0", max_nodes=10)

    def test_node_budget_exactly_met(self):
        values = [str(i) for i in range(10)]
        assert traverse_list(chain(values), "urn:n0", max_nodes=10) == values

    @pytest.mark.parametrize("bad", [0, -1])
    def test_invalid_budget(self, bad):
        with pytest.raises(ValueError):
            traverse_list(chain(["x"]), "urn:n0", max_nodes=bad)


@pytest.mark.unit
class TestMalformedShapes:
    """Test lenient handling of malformed lists."""

    def test_multiple_first_visits_each_in_order(self):
        graph = parse_ttl(MULTI_FIRST_TTL)
        assert traverse_list(graph, EX + "m") == ["a", "c", "b", "c"]

    def test_missing_rest_ends_sequence(self):
        graph = parse_ttl(MISSING_REST_TTL)
        assert traverse_list(graph, EX + "open") == ["only"]

    def test_head_without_first_is_empty(self):
        graph = parse_ttl(REST_ONLY_TTL)
        assert traverse_list(graph, EX + "hollow") == []

    def test_cell_without_first_ends_sequence(self):
        statements = chain(["x", "y"])
        statements = [st for st in statements if not (st.subject == URIRef("urn:n1") and st.predicate == RDF.first)]
        assert traverse_list(statements, "urn:n0") == ["x"]

    def test_shared_tail_is_not_a_cycle(self):
        statements = chain(["t"], prefix="urn:tail")
        statements += [
            Statement("urn:h1", RDF.first, Literal("a")),
            Statement("urn:h1", RDF.rest, URIRef("urn:tail0")),
            Statement("urn:h2", RDF.first, Literal("b")),
            Statement("urn:h2", RDF.rest, URIRef("urn:tail0")),
        ]
        graph = StatementGraph(statements)
        assert traverse_list(graph, "urn:h1") == ["a", "t"]
        assert traverse_list(graph, "urn:h2") == ["b", "t"]


@pytest.mark.unit
class TestIsListHead:
    """Test list head detection."""

    def test_pointer_to_list(self, list_graph):
        (pointer,) = list_graph.index.find("urn:x")
        assert is_list_head(list_graph, pointer) is True

    def test_literal_object(self, list_graph):
        st = Statement("urn:x", "urn:q", Literal("plain"))
        assert is_list_head(list_graph, st) is False

    def test_resource_without_first(self, record_graph):
        st = Statement(EX + "record", EX + "title", URIRef(EX + "record"))
        assert is_list_head(record_graph, st) is False

    def test_nil_is_not_a_head(self, record_graph):
        st = Statement(EX + "record", EX + "related", RDF.nil)
        assert is_list_head(record_graph, st) is False

    def test_rest_only_node_is_not_a_head(self):
        graph = parse_ttl(REST_ONLY_TTL)
        st = Statement("urn:s", "urn:p", URIRef(EX + "hollow"))
        assert ListReifier.is_list_head(graph, st) is False

    def test_unknown_blank_node(self, list_graph):
        st = Statement("urn:s", "urn:p", BNode())
        assert is_list_head(list_graph, st) is False
