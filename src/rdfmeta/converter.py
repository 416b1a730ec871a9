"""
Conversion facade.

Entry points used by the surrounding application:

- convert: bytes in one syntax -> bytes in another
- extract_list: the ordered values of an RDF list, addressed by its head
- extract_property: values of one (subject, predicate), lists expanded
- extract_property_values: all values of a subject keyed by predicate,
  lists expanded; the shape consumed by record binding

Usage:
    from rdfmeta import convert, extract_list

    ttl = convert(nt_bytes, "nt", "turtle")
    authors = extract_list(data, "turtle", "https://example.org/", "https://example.org/r1/authors")
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from rdflib import RDF

from .constants import RDFVocabulary
from .core.config import EngineConfig
from .formats.rdf.formats import RDFFormat
from .formats.rdf.list_inspector import ListShapeInspector, ListShapeReport
from .formats.rdf.list_reifier import ListReifier, Visitor
from .formats.rdf.rdf_parser import RDFGraphParser
from .formats.rdf.rdf_writer import RDFGraphWriter
from .shared.models import Statement, StatementGraph, term_value, to_term

logger = logging.getLogger(__name__)

FormatTag = Union[RDFFormat, str]


class RDFConverter:
    """
    Composes parser, writer, subject index and list reifier.

    Holds only configuration; every call works on its own graph, so one
    instance can be shared between threads.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()

    # ------------------------------------------------------------------
    # Parse / serialize
    # ------------------------------------------------------------------

    def parse(self, data: Any, source_format: FormatTag, base_uri: Optional[str] = None) -> StatementGraph:
        return RDFGraphParser.parse(
            data,
            source_format,
            base_uri=base_uri or self.config.default_base_uri,
            force_large_input=self.config.force_large_input,
        )

    def serialize(self, statements: Iterable[Statement], target_format: FormatTag) -> bytes:
        return RDFGraphWriter.serialize(statements, target_format, prefixes=self.config.prefixes)

    def convert(
        self,
        data: Any,
        source_format: FormatTag,
        target_format: FormatTag,
        base_uri: Optional[str] = None,
    ) -> bytes:
        """
        Transcode RDF between syntaxes: ``serialize(parse(data), target_format)``.

        Raises:
            ParseError: If the input does not match ``source_format``
            SerializationError: If a statement cannot be written as ``target_format``
            UnsupportedFormatError: If either format tag is unknown
        """
        source = RDFFormat.from_value(source_format)
        target = RDFFormat.from_value(target_format)
        graph = self.parse(data, source, base_uri)
        output = self.serialize(graph, target)
        logger.info(f"Converted {len(graph)} statements from {source.label} to {target.label}")
        return output

    # ------------------------------------------------------------------
    # Graph level extraction
    # ------------------------------------------------------------------

    def list_values(self, graph: StatementGraph, head: Any, visit: Optional[Visitor] = None) -> List[str]:
        """Values of the list at ``head`` in ``graph``."""
        return ListReifier.traverse_list(
            graph, head, RDFVocabulary.FIRST, visit=visit, max_nodes=self.config.max_list_nodes
        )

    def object_values(self, graph: StatementGraph, statements: Iterable[Statement]) -> List[str]:
        """
        Values of the statements' objects, in sort_key order.

        List heads are expanded in place, ``rdf:nil`` contributes nothing
        (an empty list), anything else is a scalar value.
        """
        values: List[str] = []
        for st in sorted(statements, key=Statement.sort_key):
            if st.object == RDF.nil:
                continue
            if ListReifier.is_list_head(graph, st):
                values.extend(self.list_values(graph, st.object))
            else:
                values.append(term_value(st.object))
        return values

    def property_values(self, graph: StatementGraph, subject: Any) -> Dict[str, List[str]]:
        """All values of ``subject`` keyed by predicate IRI, predicates sorted."""
        by_predicate: Dict[str, List[Statement]] = {}
        for st in graph.index.find(subject):
            by_predicate.setdefault(term_value(st.predicate), []).append(st)
        return {
            predicate: self.object_values(graph, by_predicate[predicate])
            for predicate in sorted(by_predicate)
        }

    def inspect_list(self, graph: StatementGraph, head: Any) -> ListShapeReport:
        return ListShapeInspector(max_nodes=self.config.max_list_nodes).inspect(graph, head)

    # ------------------------------------------------------------------
    # Byte level extraction
    # ------------------------------------------------------------------

    def extract_list(
        self,
        data: Any,
        source_format: FormatTag,
        base_uri: Optional[str],
        list_head_subject: Any,
        visit: Optional[Visitor] = None,
    ) -> List[str]:
        """
        Parse ``data`` and return the values of the list at ``list_head_subject``.

        N-Triples and N-Quads keep blank node labels, so ``"_:label"`` heads
        work there. Other syntaxes relabel blank nodes; address such lists
        through ``extract_property`` instead.

        Raises:
            ParseError: If the input does not match ``source_format``
            CyclicListError: If the list is cyclic or exceeds ``max_list_nodes``
        """
        graph = self.parse(data, source_format, base_uri)
        return self.list_values(graph, to_term(list_head_subject), visit=visit)

    def extract_property(
        self,
        data: Any,
        source_format: FormatTag,
        base_uri: Optional[str],
        subject: Any,
        predicate: Any,
    ) -> List[str]:
        """Parse ``data`` and return the values of ``(subject, predicate)``, lists expanded."""
        graph = self.parse(data, source_format, base_uri)
        predicate = to_term(predicate)
        statements = [st for st in graph.index.find(subject) if st.predicate == predicate]
        return self.object_values(graph, statements)

    def extract_property_values(
        self,
        data: Any,
        source_format: FormatTag,
        base_uri: Optional[str],
        subject: Any,
    ) -> Dict[str, List[str]]:
        """Parse ``data`` and return every value of ``subject`` keyed by predicate."""
        graph = self.parse(data, source_format, base_uri)
        return self.property_values(graph, subject)


def convert(
    data: Any,
    source_format: FormatTag,
    target_format: FormatTag,
    base_uri: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> bytes:
    """Transcode RDF between syntaxes. See ``RDFConverter.convert``."""
    return RDFConverter(config).convert(data, source_format, target_format, base_uri)


def extract_list(
    data: Any,
    source_format: FormatTag,
    base_uri: Optional[str],
    list_head_subject: Any,
    config: Optional[EngineConfig] = None,
) -> List[str]:
    """Ordered values of an RDF list. See ``RDFConverter.extract_list``."""
    return RDFConverter(config).extract_list(data, source_format, base_uri, list_head_subject)


def extract_property(
    data: Any,
    source_format: FormatTag,
    base_uri: Optional[str],
    subject: Any,
    predicate: Any,
    config: Optional[EngineConfig] = None,
) -> List[str]:
    """Values of one subject/predicate pair. See ``RDFConverter.extract_property``."""
    return RDFConverter(config).extract_property(data, source_format, base_uri, subject, predicate)


def extract_property_values(
    data: Any,
    source_format: FormatTag,
    base_uri: Optional[str],
    subject: Any,
    config: Optional[EngineConfig] = None,
) -> Dict[str, List[str]]:
    """Values of a subject keyed by predicate. See ``RDFConverter.extract_property_values``."""
    return RDFConverter(config).extract_property_values(data, source_format, base_uri, subject)
