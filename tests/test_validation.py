"""
Tests for InputValidator.

Tests cover:
- RDF content coercion (bytes, str, streams)
- Node budget validation
- File path security checks (traversal, symlinks, extensions)
- Output path checks

Run specific test categories:
    pytest -m security tests/test_validation.py
"""

import io
import os

import pytest

from rdfmeta.core.validators import InputValidator


# =============================================================================
# CONTENT VALIDATION TESTS
# =============================================================================

@pytest.mark.unit
class TestValidateRDFContent:
    """Test coercion of RDF input to bytes."""

    def test_bytes_pass_through(self):
        assert InputValidator.validate_rdf_content(b"<urn:a> <urn:b> <urn:c> .") == b"<urn:a> <urn:b> <urn:c> ."

    def test_str_is_encoded(self):
        assert InputValidator.validate_rdf_content("\"café\"") == "\"café\"".encode("utf-8")

    def test_bytearray(self):
        assert InputValidator.validate_rdf_content(bytearray(b"x")) == b"x"

    def test_binary_stream(self):
        assert InputValidator.validate_rdf_content(io.BytesIO(b"data")) == b"data"

    def test_text_stream(self):
        assert InputValidator.validate_rdf_content(io.StringIO("data")) == b"data"

    def test_none_rejected(self):
        """None is a value error, not a type error."""
        with pytest.raises(ValueError, match="None"):
            InputValidator.validate_rdf_content(None)

    @pytest.mark.parametrize("bad", [12, 3.5, ["a"], {"a": 1}])
    def test_wrong_type_rejected(self, bad):
        with pytest.raises(TypeError):
            InputValidator.validate_rdf_content(bad)


@pytest.mark.unit
class TestValidateMaxNodes:
    """Test node budget validation."""

    def test_valid(self):
        assert InputValidator.validate_max_nodes(1) == 1

    @pytest.mark.parametrize("bad", [0, -10])
    def test_non_positive(self, bad):
        with pytest.raises(ValueError):
            InputValidator.validate_max_nodes(bad)

    @pytest.mark.parametrize("bad", [True, 2.0, "5", None])
    def test_non_integer(self, bad):
        with pytest.raises(TypeError):
            InputValidator.validate_max_nodes(bad)


# =============================================================================
# PATH VALIDATION TESTS
# =============================================================================

@pytest.mark.unit
@pytest.mark.security
class TestValidateFilePath:
    """Test file path security checks."""

    def test_valid_file(self, temp_ttl_file):
        path = InputValidator.validate_input_rdf_path(temp_ttl_file)
        assert path.is_absolute()
        assert path.name == "record.ttl"

    @pytest.mark.parametrize("path", ["../secret.ttl", "data/../../secret.ttl", "..\\secret.ttl"])
    def test_traversal_rejected(self, path):
        with pytest.raises(ValueError, match="traversal"):
            InputValidator.validate_file_path(path, check_exists=False)

    def test_symlink_rejected(self, tmp_path, temp_ttl_file):
        link = tmp_path / "link.ttl"
        try:
            os.symlink(temp_ttl_file, link)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")
        with pytest.raises(ValueError, match="Symlink"):
            InputValidator.validate_input_rdf_path(link)

    def test_symlink_warning_when_allowed(self, tmp_path, temp_ttl_file, caplog):
        link = tmp_path / "link.ttl"
        try:
            os.symlink(temp_ttl_file, link)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")
        path = InputValidator.validate_file_path(link, reject_symlinks=False)
        assert path == temp_ttl_file.resolve()
        assert "Symlink" in caplog.text

    def test_extension_checked(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("x", encoding="utf-8")
        with pytest.raises(ValueError, match="extension"):
            InputValidator.validate_input_rdf_path(path)

    def test_extension_case_insensitive(self, tmp_path):
        path = tmp_path / "RECORD.TTL"
        path.write_text("", encoding="utf-8")
        assert InputValidator.validate_input_rdf_path(path).name == "RECORD.TTL"

    def test_directory_rejected(self, tmp_path):
        directory = tmp_path / "dir.ttl"
        directory.mkdir()
        with pytest.raises(ValueError, match="not a file"):
            InputValidator.validate_input_rdf_path(directory)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            InputValidator.validate_input_rdf_path(tmp_path / "missing.ttl")

    @pytest.mark.parametrize("bad", ["", "   "])
    def test_empty_path(self, bad):
        with pytest.raises(ValueError, match="empty"):
            InputValidator.validate_file_path(bad)

    def test_non_string_path(self):
        with pytest.raises(TypeError):
            InputValidator.validate_file_path(42)


@pytest.mark.unit
@pytest.mark.security
class TestValidateOutputPath:
    """Test output path checks."""

    def test_new_file_in_existing_directory(self, tmp_path):
        path = InputValidator.validate_output_file_path(tmp_path / "out.nq")
        assert path.parent == tmp_path.resolve()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError, match="does not exist"):
            InputValidator.validate_output_file_path(tmp_path / "missing" / "out.nq")

    def test_traversal_rejected(self):
        with pytest.raises(ValueError, match="traversal"):
            InputValidator.validate_output_file_path("../out.ttl")
