"""
RDF Parser Module

Decodes a byte stream in a declared serialization syntax into an immutable
StatementGraph. Parsing is delegated to rdflib; this module adds memory
pre-flight checks, relative reference detection and error translation.

Components:
- RDFGraphParser: parse bytes/text/streams or files into a StatementGraph
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union

from rdflib import BNode, Dataset, Graph, URIRef
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

from ...constants import Defaults, MemoryLimits
from ...core.exceptions import ParseError
from ...core.memory import MemoryManager
from ...core.validators import InputValidator
from ...shared.models import Statement, StatementGraph
from .formats import RDFFormat

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

# Syntaxes for which an empty document is valid and parses to nothing
_EMPTY_OK = {RDFFormat.TURTLE, RDFFormat.N_TRIPLES, RDFFormat.N_QUADS, RDFFormat.TRIG, RDFFormat.N3}

# Syntaxes whose parsers accept a bnode_context mapping document labels to nodes
_LABELLED_BNODES = {RDFFormat.N_TRIPLES, RDFFormat.N_QUADS}


class _DocumentLabels(dict):
    """
    bnode_context that maps every blank node label to a node of the same id.

    ``_:n1`` in the document parses to ``BNode("n1")``, so callers can
    address blank nodes by the labels they wrote. Labels are document
    scoped: merging graphs parsed from different documents can join
    nodes that share a label.
    """

    def __missing__(self, label):
        node = self[label] = BNode(label)
        return node

    def __contains__(self, label):
        return True

    def get(self, label, default=None):
        return self[label]


def _error_location(exc: BaseException) -> Tuple[Optional[int], Optional[int]]:
    """Best-effort (line, offset) from the decoder's exception."""
    if hasattr(exc, "getLineNumber"):
        # xml.sax.SAXParseException
        return exc.getLineNumber(), exc.getColumnNumber()
    if isinstance(exc, json.JSONDecodeError):
        return exc.lineno, exc.pos
    lines = getattr(exc, "lines", None)
    if isinstance(lines, int):
        # notation3 BadSyntax counts newlines before the error
        offset = getattr(exc, "_i", None)
        return lines + 1, offset if isinstance(offset, int) else None
    return None, None


class RDFGraphParser:
    """
    Handles RDF parsing with memory management and validation.

    This class encapsulates the graph parsing logic, including:
    - Pre-flight memory checks
    - Graph creation and parsing for every registered syntax
    - Detection of relative IRIs that could not be resolved
    - Translation of decoder failures into ParseError
    """

    @staticmethod
    def _read_statements(payload: bytes, fmt: RDFFormat, public_id: str) -> List[Statement]:
        options = {"bnode_context": _DocumentLabels()} if fmt in _LABELLED_BNODES else {}
        if fmt.context_aware:
            dataset = Dataset()
            dataset.parse(data=payload, format=fmt.plugin, publicID=public_id, **options)
            statements = []
            for ctx in dataset.contexts():
                name = None if ctx.identifier == DATASET_DEFAULT_GRAPH_ID else ctx.identifier
                statements.extend(Statement.from_rdflib(triple, name) for triple in ctx)
            return statements

        graph = Graph()
        graph.parse(data=payload, format=fmt.plugin, publicID=public_id, **options)
        return [Statement.from_rdflib(triple) for triple in graph]

    @staticmethod
    def _check_unresolved(statements: Iterable[Statement], fmt: RDFFormat, base_uri: Optional[str]) -> None:
        """
        Raise ParseError for IRIs that are still relative after parsing.

        Without a caller supplied base, rdflib resolves against
        ``Defaults.UNRESOLVED_BASE``; anything under it was relative input.
        Scheme-less IRIs come from syntaxes that do not resolve at all.
        """
        for st in statements:
            for term in (st.subject, st.predicate, st.object, st.context):
                if not isinstance(term, URIRef):
                    continue
                text = str(term)
                if not base_uri and text.startswith(Defaults.UNRESOLVED_BASE):
                    relative = text[len(Defaults.UNRESOLVED_BASE):] or "<>"
                    raise ParseError(
                        f"Relative IRI reference '{relative}' cannot be resolved without a base URI",
                        format=fmt.label,
                    )
                if not _SCHEME_RE.match(text):
                    raise ParseError(
                        f"Relative IRI reference '{text}' is not allowed in {fmt.label}",
                        format=fmt.label,
                    )

    @classmethod
    def parse(
        cls,
        data: Any,
        source_format: Union[RDFFormat, str],
        base_uri: Optional[str] = None,
        force_large_input: bool = False,
    ) -> StatementGraph:
        """
        Parse RDF input into a StatementGraph.

        Args:
            data: bytes, str, or a binary stream (read fully)
            source_format: Declared syntax (RDFFormat or any tag accepted by RDFFormat.from_value)
            base_uri: Base for relative reference resolution, not validated.
                An empty string counts as no base.
            force_large_input: If True, skip the memory safety refusal

        Returns:
            The parsed graph. Nothing is returned on failure.

        Raises:
            ParseError: If the input does not conform to the declared syntax
                or holds a relative IRI that cannot be resolved
            UnsupportedFormatError: If the format tag is unknown
            MemoryError: If insufficient memory is available
        """
        fmt = RDFFormat.from_value(source_format)
        payload = InputValidator.validate_rdf_content(data)
        base_uri = base_uri or None

        size_mb = len(payload) / (1024 * 1024)
        MemoryManager.ensure_memory_available(size_mb, force=force_large_input)
        if size_mb > MemoryLimits.LARGE_INPUT_WARNING_MB:
            logger.warning(
                f"Large {fmt.label} input detected ({size_mb:.1f} MB). "
                "Parsing may take several minutes."
            )

        if not payload.strip() and fmt in _EMPTY_OK:
            logger.warning(f"Empty {fmt.label} input - no statements parsed")
            return StatementGraph()

        logger.debug(f"Parsing {fmt.label} input ({size_mb:.2f} MB, base={base_uri!r})")
        MemoryManager.log_memory_status("Before parsing")

        try:
            statements = cls._read_statements(payload, fmt, base_uri or Defaults.UNRESOLVED_BASE)
        except MemoryError as e:
            MemoryManager.log_memory_status("After MemoryError")
            raise MemoryError(
                f"Insufficient memory while parsing {fmt.label} input ({size_mb:.1f} MB). "
                f"Original error: {e}"
            ) from e
        except Exception as e:
            line, offset = _error_location(e)
            logger.error(f"Failed to parse {fmt.label} input: {e}")
            raise ParseError(
                f"Invalid {fmt.label} syntax: {e}",
                format=fmt.label,
                line=line,
                offset=offset,
                details=type(e).__name__,
            ) from e

        try:
            cls._check_unresolved(statements, fmt, base_uri)
        except ParseError as e:
            logger.error(f"Failed to parse {fmt.label} input: {e}")
            raise

        graph = StatementGraph(statements)
        MemoryManager.log_memory_status("After parsing")

        if not graph:
            logger.warning(f"Parsed {fmt.label} input is empty - no statements found")
        else:
            logger.info(f"Successfully parsed {len(graph)} statements from {fmt.label} input ({size_mb:.2f} MB)")

        return graph

    @classmethod
    def parse_file(
        cls,
        file_path: Union[str, Path],
        source_format: Optional[Union[RDFFormat, str]] = None,
        base_uri: Optional[str] = None,
        force_large_input: bool = False,
    ) -> StatementGraph:
        """
        Parse an RDF file into a StatementGraph.

        Args:
            file_path: Path to the file
            source_format: Declared syntax; inferred from the extension when omitted
            base_uri: Base for relative references; defaults to the file URI
            force_large_input: If True, skip the memory safety refusal

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the path fails validation or the format cannot be inferred
            ParseError: If the file has invalid syntax
            MemoryError: If insufficient memory is available
        """
        path = InputValidator.validate_input_rdf_path(file_path)

        fmt = RDFFormat.from_value(source_format) if source_format else RDFFormat.from_path(path)
        if fmt is None:
            raise ValueError(f"Cannot infer RDF format from file extension: {path.suffix!r}")

        file_size_mb = path.stat().st_size / (1024 * 1024)
        logger.info(f"Reading {fmt.label} file {path} ({file_size_mb:.2f} MB)")
        MemoryManager.ensure_memory_available(file_size_mb, force=force_large_input)

        with open(path, 'rb') as f:
            payload = f.read()

        return cls.parse(
            payload,
            fmt,
            base_uri=base_uri or path.as_uri(),
            force_large_input=force_large_input,
        )
