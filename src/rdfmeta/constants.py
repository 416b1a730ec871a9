"""
Centralized configuration constants for the rdfmeta statement-graph engine.

This module provides a single source of truth for vocabulary IRIs,
default values and limits used throughout the library.
"""

from typing import Final

from rdflib import RDF, URIRef

# ============================================================================
# RDF Vocabulary
# ============================================================================

class RDFVocabulary:
    """Well-known RDF list vocabulary. Fixed, not configurable."""

    NAMESPACE: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
    """The rdf: namespace."""

    FIRST: Final[URIRef] = RDF.first
    """Predicate linking a list node to its element."""

    REST: Final[URIRef] = RDF.rest
    """Predicate linking a list node to the next node."""

    NIL: Final[URIRef] = RDF.nil
    """Sentinel terminating a list."""


# ============================================================================
# Processing Limits
# ============================================================================

class ProcessingLimits:
    """Traversal limits."""

    MAX_LIST_NODES: Final[int] = 10000
    """Maximum number of list nodes entered by a single traversal."""


# ============================================================================
# Memory Management
# ============================================================================

class MemoryLimits:
    """Memory management constants."""

    MAX_SAFE_INPUT_MB: Final[int] = 500
    """Default maximum input size without explicit override (MB)."""

    MEMORY_MULTIPLIER: Final[float] = 3.5
    """RDFlib typically uses ~3-4x input size in memory."""

    MIN_AVAILABLE_MEMORY_MB: Final[int] = 256
    """Minimum available memory required before parsing (MB)."""

    LOAD_FACTOR: Final[float] = 0.7
    """Share of available memory considered safe to use."""

    LARGE_INPUT_WARNING_MB: Final[int] = 100
    """Inputs above this size get a slow-parse warning (MB)."""


# ============================================================================
# Defaults
# ============================================================================

class Defaults:
    """Default values used by the parser and writer."""

    UNRESOLVED_BASE: Final[str] = "http://rdfmeta.invalid/unresolved/"
    """Base handed to rdflib when the caller gives none.

    Any parsed IRI under this base was a relative reference in the input.
    """

    PREFIXES: Final[tuple] = (
        ("rdf", "http://www.w3.org/1999/02/22-rdf-syntax-ns#"),
        ("rdfs", "http://www.w3.org/2000/01/rdf-schema#"),
        ("xsd", "http://www.w3.org/2001/XMLSchema#"),
        ("owl", "http://www.w3.org/2002/07/owl#"),
        ("dcterms", "http://purl.org/dc/terms/"),
    )
    """Prefixes bound for prefix-capable output syntaxes."""

    ENCODING: Final[str] = "utf-8"
    """Encoding of serialized output."""


# ============================================================================
# Environment Variables
# ============================================================================

class EnvVars:
    """Environment variables read by the configuration layer."""

    MAX_LIST_NODES: Final[str] = "RDFMETA_MAX_LIST_NODES"
    LOG_LEVEL: Final[str] = "RDFMETA_LOG_LEVEL"
    FORCE_LARGE_INPUT: Final[str] = "RDFMETA_FORCE_LARGE_INPUT"


# ============================================================================
# Logging
# ============================================================================

class LoggingConfig:
    """Logging configuration."""

    DEFAULT_LOG_LEVEL: Final[str] = "INFO"
    """Default logging level."""

    LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    """Default log format string."""

    DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
    """Default date format for logs."""

    DEFAULT_FORMAT_STYLE: Final[str] = "text"
    """Human-readable formatter style."""

    JSON_DATE_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S.%fZ"
    """ISO-8601 timestamp format for structured logs."""

    SUPPORTED_FORMATS: Final[tuple] = ("text", "json")
    """Supported formatter styles."""

    MAX_LOG_FILE_MB: Final[int] = 10
    """Maximum log file size before rotation (MB)."""

    LOG_BACKUP_COUNT: Final[int] = 5
    """Number of backup log files to keep."""

    ROTATION_ENABLED: Final[bool] = True
    """Enable log rotation by default when a file handler is configured."""
