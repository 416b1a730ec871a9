"""Integration tests for the file based RDF pipeline.

These tests verify the complete workflow: read a record from disk, convert
it, write it back out and bind its values, using temporary files only.
"""

import json

import pytest

from rdfmeta import RDFConverter, graphs_equivalent, load_config
from rdfmeta.formats.rdf import RDFGraphParser, RDFGraphWriter

from fixtures import EX, RECORD_TTL


@pytest.mark.integration
class TestRDFFilePipeline:
    """Test end-to-end file workflows."""

    @pytest.fixture
    def record_file(self, tmp_path):
        path = tmp_path / "record.ttl"
        path.write_text(RECORD_TTL, encoding="utf-8")
        return path

    def test_ttl_file_to_nquads_file(self, record_file, tmp_path):
        """Convert a Turtle file to N-Quads and read it back."""
        graph = RDFGraphParser.parse_file(record_file, base_uri=EX)
        out = RDFGraphWriter.write_file(graph, tmp_path / "record.nq")

        assert out.read_bytes().endswith(b"\n")
        reparsed = RDFGraphParser.parse_file(out)
        assert graphs_equivalent(reparsed, graph)

    def test_bind_record_values_from_file(self, record_file):
        """Extract the keyed values a record binder would consume."""
        converter = RDFConverter()
        graph = RDFGraphParser.parse_file(record_file, base_uri=EX)
        values = converter.property_values(graph, EX + "record")

        assert values[EX + "authors"] == ["Ada", "Grace"]
        assert values[EX + "keywords"] == ["rdf", "lists"]
        assert values[EX + "title"] == ["Statement graphs"]

    def test_configured_pipeline(self, record_file, tmp_path):
        """Drive the converter from a JSON configuration file."""
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({
            "max_list_nodes": 100,
            "default_base_uri": EX,
            "prefixes": {"ex": EX},
        }), encoding="utf-8")
        config = load_config(str(config_path), apply_env=False)
        converter = RDFConverter(config)

        output = converter.convert(record_file.read_bytes(), "turtle", "turtle")
        assert b"@prefix ex: <http://example.org/>" in output
        assert converter.extract_list(output, "turtle", None, EX + "authorList") == ["Ada", "Grace"]
