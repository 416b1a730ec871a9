"""
RDF Writer Module

Encodes a collection of Statements into a declared serialization syntax.
Output is a pure function of the statement set: statements are fed to
rdflib in ``Statement.sort_key`` order and line-based output is sorted line
by line, so identical sets give identical bytes.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from rdflib import Dataset, Graph
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID

from ...constants import Defaults
from ...core.exceptions import SerializationError
from ...core.validators import InputValidator
from ...shared.models import Statement
from .formats import RDFFormat

logger = logging.getLogger(__name__)

# Statement terminator, with the default graph label or the doubled space
# different rdflib releases write for quads without a graph name
_LINE_END_RE = re.compile(rb"\s+(?:" + re.escape(DATASET_DEFAULT_GRAPH_ID.n3().encode()) + rb"\s+)?\.$")


class RDFGraphWriter:
    """
    Serializes Statements with rdflib.

    Named graphs are kept for context-aware targets (N-Quads, TriG, TriX,
    JSON-LD) and merged into the default graph otherwise.
    """

    @staticmethod
    def _bind_prefixes(graph: Graph, prefixes: Optional[Mapping[str, str]]) -> None:
        for prefix, namespace in Defaults.PREFIXES:
            graph.bind(prefix, namespace, override=True)
        for prefix, namespace in (prefixes or {}).items():
            graph.bind(prefix, namespace, override=True)

    @classmethod
    def _build_store(
        cls,
        ordered: List[Statement],
        fmt: RDFFormat,
        prefixes: Optional[Mapping[str, str]],
    ) -> Graph:
        if fmt.context_aware:
            dataset = Dataset()
            cls._bind_prefixes(dataset, prefixes)
            for st in ordered:
                if st.context is None:
                    dataset.add(st.as_triple())
                else:
                    dataset.graph(st.context).add(st.as_triple())
            return dataset

        graph = Graph()
        cls._bind_prefixes(graph, prefixes)
        dropped = 0
        for st in ordered:
            if st.context is not None:
                dropped += 1
            graph.add(st.as_triple())
        if dropped:
            logger.warning(
                f"{fmt.label} cannot carry named graphs: "
                f"{dropped} statements merged into the default graph"
            )
        return graph

    @classmethod
    def serialize(
        cls,
        statements: Iterable[Statement],
        target_format: Union[RDFFormat, str],
        prefixes: Optional[Mapping[str, str]] = None,
    ) -> bytes:
        """
        Serialize statements to bytes.

        Args:
            statements: Any iterable of Statements (a StatementGraph, set or list)
            target_format: Output syntax (RDFFormat or any tag accepted by RDFFormat.from_value)
            prefixes: Extra prefix bindings for prefix-capable syntaxes

        Returns:
            The encoded document (UTF-8). Empty input gives a valid empty document.

        Raises:
            SerializationError: If a statement cannot be represented in the target syntax
            UnsupportedFormatError: If the format tag is unknown
        """
        fmt = RDFFormat.from_value(target_format)
        # Duplicates collapse before ordering, matching set semantics
        ordered = sorted(set(statements), key=Statement.sort_key)

        store = cls._build_store(ordered, fmt, prefixes)
        try:
            output = store.serialize(format=fmt.plugin, encoding=Defaults.ENCODING)
        except Exception as e:
            logger.error(f"Failed to serialize {len(ordered)} statements as {fmt.label}: {e}")
            raise SerializationError(
                f"Cannot serialize statements as {fmt.label}: {e}",
                format=fmt.label,
                details=type(e).__name__,
            ) from e

        if fmt.line_based:
            lines = sorted(
                _LINE_END_RE.sub(b" .", line.rstrip())
                for line in output.splitlines()
                if line.strip()
            )
            output = b"".join(line + b"\n" for line in lines)

        logger.info(f"Serialized {len(ordered)} statements as {fmt.label} ({len(output)} bytes)")
        return output

    @classmethod
    def write_file(
        cls,
        statements: Iterable[Statement],
        file_path: Union[str, Path],
        target_format: Optional[Union[RDFFormat, str]] = None,
        prefixes: Optional[Mapping[str, str]] = None,
    ) -> Path:
        """
        Serialize statements to a file.

        The format is inferred from the extension when not given.

        Raises:
            ValueError: If the path fails validation or the format cannot be inferred
            PermissionError: If the output directory is not writable
            SerializationError: If a statement cannot be represented
        """
        path = InputValidator.validate_output_file_path(file_path)
        fmt = RDFFormat.from_value(target_format) if target_format else RDFFormat.from_path(path)
        if fmt is None:
            raise ValueError(f"Cannot infer RDF format from file extension: {path.suffix!r}")

        output = cls.serialize(statements, fmt, prefixes=prefixes)
        with open(path, 'wb') as f:
            f.write(output)
        logger.info(f"Wrote {fmt.label} output to {path}")
        return path
