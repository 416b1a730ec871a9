"""
Input validation utilities for the rdfmeta engine.

This module provides centralized input validation with consistent error messages for:
- RDF content validation (bytes, text or binary streams)
- File path validation with security checks
- Parameter type and value checking

Security features:
- Path traversal detection (../ sequences)
- Symlink detection
- Extension validation

Usage:
    from rdfmeta.core.validators import InputValidator

    data = InputValidator.validate_rdf_content(raw)
    path = InputValidator.validate_file_path("record.ttl", allowed_extensions=[".ttl"])
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Union

logger = logging.getLogger(__name__)


class InputValidator:
    """
    Centralized input validation for rdfmeta public functions.
    """

    RDF_EXTENSIONS = [
        '.ttl',
        '.turtle',
        '.nt',
        '.nq',
        '.nquads',
        '.rdf',
        '.owl',
        '.xml',
        '.jsonld',
        '.json',
        '.trig',
        '.trix',
        '.n3',
    ]
    CONFIG_EXTENSIONS = ['.json']

    @staticmethod
    def validate_rdf_content(content: Any, encoding: str = "utf-8") -> bytes:
        """
        Validate RDF input and return it as bytes.

        Args:
            content: bytes, str, or a binary stream with a ``read`` method
            encoding: Encoding applied to str input

        Returns:
            The fully buffered input

        Raises:
            ValueError: If content is None
            TypeError: If content is not bytes, str or a binary stream
        """
        if content is None:
            raise ValueError("RDF content cannot be None")

        if isinstance(content, (bytes, bytearray, memoryview)):
            return bytes(content)

        if isinstance(content, str):
            return content.encode(encoding)

        read = getattr(content, "read", None)
        if callable(read):
            data = read()
            if isinstance(data, str):
                return data.encode(encoding)
            if isinstance(data, (bytes, bytearray)):
                return bytes(data)
            raise TypeError(
                f"RDF stream must yield bytes or str, got {type(data).__name__}"
            )

        raise TypeError(
            f"RDF content must be bytes, str or a binary stream, got {type(content).__name__}"
        )

    @staticmethod
    def validate_max_nodes(value: Any) -> int:
        """
        Validate a traversal node budget.

        Raises:
            TypeError: If value is not an integer
            ValueError: If value is not positive
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"max_nodes must be int, got {type(value).__name__}")
        if value <= 0:
            raise ValueError(f"max_nodes must be positive, got {value}")
        return value

    @staticmethod
    def _check_path_traversal(path_str: str) -> None:
        """
        Check for path traversal attempts.

        Raises:
            ValueError: If path traversal detected
        """
        normalized = path_str.replace('\\', '/')
        if any(part == '..' for part in normalized.split('/')):
            raise ValueError(
                f"Path traversal detected in path: {path_str}. "
                f"Paths containing '..' are not allowed for security reasons."
            )

    @staticmethod
    def _check_symlink(path_obj: Path, strict: bool = False) -> None:
        """
        Check if path is a symlink.

        Args:
            path_obj: Path object to check (before resolving)
            strict: If True, raise exception on symlink; if False, log warning

        Raises:
            ValueError: If symlink detected and strict mode enabled
        """
        if not path_obj.is_symlink():
            return
        msg = (
            f"Security error: Symlink detected: {path_obj}. "
            f"Symlinks are not allowed for security reasons. "
            f"Please use the actual file path instead."
        )
        if strict:
            raise ValueError(msg)
        logger.warning(msg)

    @classmethod
    def validate_file_path(
        cls,
        path: Union[str, Path],
        allowed_extensions: Optional[List[str]] = None,
        check_exists: bool = True,
        check_readable: bool = True,
        reject_symlinks: bool = True,
    ) -> Path:
        """
        Validate file path for security and correctness.

        Args:
            path: Path to validate
            allowed_extensions: List of allowed extensions (e.g., ['.ttl', '.rdf'])
            check_exists: Whether to verify file exists
            check_readable: Whether to verify file is readable
            reject_symlinks: If True, raise on symlinks; if False, warn only

        Returns:
            Validated Path object (resolved to absolute path)

        Raises:
            TypeError: If path is not a string or Path
            ValueError: If path is empty, has invalid extension, traversal detected,
                or symlink found (if reject_symlinks=True)
            FileNotFoundError: If file doesn't exist (when check_exists=True)
            PermissionError: If file is not readable (when check_readable=True)
        """
        if isinstance(path, Path):
            path = str(path)
        if not isinstance(path, str):
            raise TypeError(f"File path must be string, got {type(path).__name__}")

        if not path.strip():
            raise ValueError("File path cannot be empty")

        path = path.strip()
        cls._check_path_traversal(path)

        raw_path = Path(path)
        cls._check_symlink(raw_path, strict=reject_symlinks)
        path_obj = raw_path.resolve()

        if check_exists:
            if not path_obj.exists():
                raise FileNotFoundError(f"File not found: {path_obj}")
            if not path_obj.is_file():
                raise ValueError(f"Path is not a file: {path_obj}")

        if allowed_extensions:
            normalized_extensions = [
                ext.lower() if ext.startswith('.') else f'.{ext.lower()}'
                for ext in allowed_extensions
            ]
            if path_obj.suffix.lower() not in normalized_extensions:
                raise ValueError(
                    f"Invalid file extension: '{path_obj.suffix}'. "
                    f"Expected one of: {', '.join(normalized_extensions)}"
                )

        if check_readable and check_exists:
            if not os.access(path_obj, os.R_OK):
                raise PermissionError(f"File is not readable: {path_obj}")

        return path_obj

    @classmethod
    def validate_input_rdf_path(cls, path: Union[str, Path]) -> Path:
        """Validate an RDF input file path."""
        return cls.validate_file_path(path, allowed_extensions=cls.RDF_EXTENSIONS)

    @classmethod
    def validate_output_file_path(
        cls,
        path: Union[str, Path],
        allowed_extensions: Optional[List[str]] = None,
    ) -> Path:
        """
        Validate an output file path. The parent directory must exist and be writable.

        Raises:
            ValueError: On traversal, bad extension or an existing symlink
            PermissionError: If the parent directory is not writable
        """
        path_obj = cls.validate_file_path(
            path,
            allowed_extensions=allowed_extensions or cls.RDF_EXTENSIONS,
            check_exists=False,
            check_readable=False,
        )
        parent = path_obj.parent
        if not parent.exists():
            raise ValueError(f"Output directory does not exist: {parent}")
        if not os.access(parent, os.W_OK):
            raise PermissionError(f"Output directory is not writable: {parent}")
        return path_obj

    @classmethod
    def validate_config_file_path(cls, path: Union[str, Path]) -> Path:
        """Validate a JSON configuration file path."""
        return cls.validate_file_path(path, allowed_extensions=cls.CONFIG_EXTENSIONS)
