"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # Integration tests
    pytest -m slow          # Tests that take >1s
    pytest -m security      # Security-related tests

Fixtures are centralized in tests/fixtures/ for reuse across all test modules.
"""

import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from fixtures import (
    CYCLIC_TTL,
    LIST_NT,
    NAMED_GRAPH_NQ,
    RECORD_TTL,
    SIMPLE_NT,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Tests that take more than 1 second")
    config.addinivalue_line("markers", "security: Security-related tests (path traversal, symlinks)")


# =============================================================================
# RDF Fixtures
# =============================================================================

@pytest.fixture
def list_nt():
    """N-Triples with <urn:x> <urn:p> pointing at the list ("a" "b")."""
    return LIST_NT


@pytest.fixture
def simple_nt():
    """Three plain N-Triples statements, no lists."""
    return SIMPLE_NT


@pytest.fixture
def named_graph_nq():
    """N-Quads with one named graph and one default graph statement."""
    return NAMED_GRAPH_NQ


@pytest.fixture
def record_ttl():
    """Turtle record with a named-cell list, a collection and an rdf:nil value."""
    return RECORD_TTL


@pytest.fixture
def cyclic_ttl():
    """Turtle with a two node rdf:rest cycle."""
    return CYCLIC_TTL


@pytest.fixture
def list_graph(list_nt):
    """Parsed StatementGraph of ``list_nt``."""
    from rdfmeta.formats.rdf import RDFGraphParser
    return RDFGraphParser.parse(list_nt, "nt")


@pytest.fixture
def record_graph(record_ttl):
    """Parsed StatementGraph of ``record_ttl``."""
    from rdfmeta.formats.rdf import RDFGraphParser
    return RDFGraphParser.parse(record_ttl, "turtle", base_uri="http://example.org/")


@pytest.fixture
def temp_ttl_file(tmp_path, record_ttl):
    """Create a temporary TTL file for testing."""
    ttl_file = tmp_path / "record.ttl"
    ttl_file.write_text(record_ttl, encoding='utf-8')
    return ttl_file
