"""
Serialization format registry.

Maps the format tags callers use (enum members, names, file extensions and
MIME types) onto rdflib parser/serializer plugin names.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from ...core.exceptions import UnsupportedFormatError


@dataclass(frozen=True)
class FormatInfo:
    """Static description of a serialization syntax."""
    plugin: str
    label: str
    extensions: Tuple[str, ...]
    mime_types: Tuple[str, ...]
    context_aware: bool = False
    line_based: bool = False


class RDFFormat(Enum):
    """Supported RDF serialization syntaxes. The value is the rdflib plugin name."""
    TURTLE = "turtle"
    N_TRIPLES = "nt"
    N_QUADS = "nquads"
    RDF_XML = "xml"
    JSON_LD = "json-ld"
    TRIG = "trig"
    TRIX = "trix"
    N3 = "n3"

    @property
    def info(self) -> FormatInfo:
        return _FORMAT_INFO[self]

    @property
    def plugin(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.info.label

    @property
    def context_aware(self) -> bool:
        return self.info.context_aware

    @property
    def line_based(self) -> bool:
        return self.info.line_based

    @property
    def default_extension(self) -> str:
        return self.info.extensions[0]

    @classmethod
    def from_value(cls, value: Union["RDFFormat", str]) -> "RDFFormat":
        """
        Resolve a format tag.

        Args:
            value: An RDFFormat, a format name ("turtle", "ttl", "rdf/xml"),
                a file extension (".nt") or a MIME type ("text/turtle")

        Returns:
            The matching RDFFormat

        Raises:
            UnsupportedFormatError: If the tag is not recognised
        """
        if isinstance(value, RDFFormat):
            return value
        if not isinstance(value, str) or not value.strip():
            raise UnsupportedFormatError(f"Unsupported RDF format: {value!r}")

        key = value.strip().lower()
        # MIME types may carry parameters, e.g. "text/turtle; charset=utf-8"
        key = key.split(";", 1)[0].strip()

        fmt = _ALIASES.get(key) or _ALIASES.get(key.lstrip("."))
        if fmt is None:
            raise UnsupportedFormatError(
                f"Unsupported RDF format: {value!r}. "
                f"Expected one of: {', '.join(f.label for f in cls)}"
            )
        return fmt

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> Optional["RDFFormat"]:
        """Infer the format from a file extension, None when unknown."""
        suffix = Path(path).suffix.lower()
        if not suffix:
            return None
        return _ALIASES.get(suffix.lstrip("."))


_FORMAT_INFO: Dict[RDFFormat, FormatInfo] = {
    RDFFormat.TURTLE: FormatInfo(
        plugin="turtle",
        label="Turtle",
        extensions=(".ttl", ".turtle"),
        mime_types=("text/turtle", "application/x-turtle"),
    ),
    RDFFormat.N_TRIPLES: FormatInfo(
        plugin="nt",
        label="N-Triples",
        extensions=(".nt",),
        mime_types=("application/n-triples",),
        line_based=True,
    ),
    RDFFormat.N_QUADS: FormatInfo(
        plugin="nquads",
        label="N-Quads",
        extensions=(".nq", ".nquads"),
        mime_types=("application/n-quads",),
        context_aware=True,
        line_based=True,
    ),
    RDFFormat.RDF_XML: FormatInfo(
        plugin="xml",
        label="RDF/XML",
        extensions=(".rdf", ".owl", ".xml"),
        mime_types=("application/rdf+xml",),
    ),
    RDFFormat.JSON_LD: FormatInfo(
        plugin="json-ld",
        label="JSON-LD",
        extensions=(".jsonld", ".json"),
        mime_types=("application/ld+json",),
        context_aware=True,
    ),
    RDFFormat.TRIG: FormatInfo(
        plugin="trig",
        label="TriG",
        extensions=(".trig",),
        mime_types=("application/trig",),
        context_aware=True,
    ),
    RDFFormat.TRIX: FormatInfo(
        plugin="trix",
        label="TriX",
        extensions=(".trix",),
        mime_types=("application/trix",),
        context_aware=True,
    ),
    RDFFormat.N3: FormatInfo(
        plugin="n3",
        label="N3",
        extensions=(".n3",),
        mime_types=("text/n3",),
    ),
}


def _build_aliases() -> Dict[str, RDFFormat]:
    aliases: Dict[str, RDFFormat] = {}
    for fmt, info in _FORMAT_INFO.items():
        aliases[fmt.value] = fmt
        aliases[fmt.name.lower()] = fmt
        aliases[info.label.lower()] = fmt
        for ext in info.extensions:
            aliases[ext.lstrip(".")] = fmt
        for mime in info.mime_types:
            aliases[mime] = fmt
    aliases.update({
        "ntriples": RDFFormat.N_TRIPLES,
        "n-quads": RDFFormat.N_QUADS,
        "rdfxml": RDFFormat.RDF_XML,
        "rdf+xml": RDFFormat.RDF_XML,
        "pretty-xml": RDFFormat.RDF_XML,
        "jsonld": RDFFormat.JSON_LD,
    })
    return aliases


_ALIASES: Dict[str, RDFFormat] = _build_aliases()
