"""
Core utilities and cross-cutting concerns for rdfmeta.

- Exceptions (RDFMetaError, ParseError, SerializationError, CyclicListError)
- Configuration (EngineConfig, load_config)
- Logging setup (setup_logging, JSONFormatter)
- Input validation (InputValidator)
- Memory management (MemoryManager)

Usage:
    from rdfmeta.core import EngineConfig, setup_logging
    from rdfmeta.core.exceptions import ParseError
"""

from .exceptions import (
    CyclicListError,
    ParseError,
    RDFMetaError,
    SerializationError,
    UnsupportedFormatError,
)
from .config import EngineConfig, load_config
from .logging_setup import JSONFormatter, setup_logging
from .memory import MemoryManager
from .validators import InputValidator

__all__ = [
    'CyclicListError',
    'ParseError',
    'RDFMetaError',
    'SerializationError',
    'UnsupportedFormatError',
    'EngineConfig',
    'load_config',
    'JSONFormatter',
    'setup_logging',
    'MemoryManager',
    'InputValidator',
]
