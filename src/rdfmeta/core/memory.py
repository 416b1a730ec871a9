"""
Memory pre-flight checks.

Graphs are fully materialized in memory, so inputs are checked against the
available system memory before parsing to fail with a helpful message
instead of exhausting the process.
"""

import logging
from typing import Tuple

import psutil

from ..constants import MemoryLimits

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Manage memory usage during RDF parsing to prevent out-of-memory crashes.
    """

    MIN_AVAILABLE_MB = MemoryLimits.MIN_AVAILABLE_MEMORY_MB
    MAX_SAFE_INPUT_MB = MemoryLimits.MAX_SAFE_INPUT_MB
    MEMORY_MULTIPLIER = MemoryLimits.MEMORY_MULTIPLIER
    LOAD_FACTOR = MemoryLimits.LOAD_FACTOR

    @staticmethod
    def get_available_memory_mb() -> float:
        """
        Get available system memory in MB.

        Returns:
            Available memory in MB, or infinity if detection fails.
        """
        try:
            return psutil.virtual_memory().available / (1024 * 1024)
        except (OSError, RuntimeError) as e:
            logger.warning(f"Could not determine available memory: {e}")
            return float('inf')

    @staticmethod
    def get_memory_usage_mb() -> float:
        """Get current process memory usage in MB."""
        try:
            return psutil.Process().memory_info().rss / (1024 * 1024)
        except (OSError, psutil.Error):
            return 0.0

    @classmethod
    def check_memory_available(cls, input_size_mb: float, force: bool = False) -> Tuple[bool, str]:
        """
        Check if enough memory is available to parse an input.

        Args:
            input_size_mb: Size of the input in MB.
            force: If True, skip the hard size limit and the threshold refusal.

        Returns:
            Tuple of (can_proceed: bool, message: str)
        """
        estimated_usage_mb = input_size_mb * cls.MEMORY_MULTIPLIER

        if not force and input_size_mb > cls.MAX_SAFE_INPUT_MB:
            return False, (
                f"Input size ({input_size_mb:.1f}MB) exceeds safe limit ({cls.MAX_SAFE_INPUT_MB}MB). "
                f"Estimated memory required: ~{estimated_usage_mb:.0f}MB. "
                f"To process anyway, set force_large_input or split the input."
            )

        available_mb = cls.get_available_memory_mb()

        if available_mb == float('inf'):
            return True, f"Memory check unavailable. Proceeding with {input_size_mb:.1f}MB input."

        if available_mb < cls.MIN_AVAILABLE_MB and not force:
            return False, (
                f"Insufficient free memory. "
                f"Available: {available_mb:.0f}MB, "
                f"Minimum required: {cls.MIN_AVAILABLE_MB}MB."
            )

        safe_threshold_mb = available_mb * cls.LOAD_FACTOR

        if estimated_usage_mb > safe_threshold_mb:
            if force:
                return True, (
                    f"WARNING: Input may exceed safe memory limits. "
                    f"Input: {input_size_mb:.1f}MB, "
                    f"Estimated usage: ~{estimated_usage_mb:.0f}MB, "
                    f"Safe threshold: {safe_threshold_mb:.0f}MB. "
                    f"Proceeding due to force flag."
                )
            return False, (
                f"Input may be too large for available memory. "
                f"Input size: {input_size_mb:.1f}MB, "
                f"Estimated parsing memory: ~{estimated_usage_mb:.0f}MB, "
                f"Safe threshold: {safe_threshold_mb:.0f}MB "
                f"(Available: {available_mb:.0f}MB)."
            )

        return True, (
            f"Memory OK: Input {input_size_mb:.1f}MB, "
            f"estimated usage ~{estimated_usage_mb:.0f}MB of {available_mb:.0f}MB available"
        )

    @classmethod
    def ensure_memory_available(cls, input_size_mb: float, force: bool = False) -> None:
        """
        Raise MemoryError when ``check_memory_available`` refuses the input.
        """
        can_proceed, message = cls.check_memory_available(input_size_mb, force=force)
        if not can_proceed:
            logger.error(f"Memory check failed: {message}")
            raise MemoryError(message)
        logger.debug(f"Memory check: {message}")

    @classmethod
    def log_memory_status(cls, context: str = "") -> None:
        """Log current memory status for debugging."""
        if not logger.isEnabledFor(logging.DEBUG):
            return
        process_mb = cls.get_memory_usage_mb()
        available_mb = cls.get_available_memory_mb()
        prefix = f"[{context}] " if context else ""
        logger.debug(
            f"{prefix}Memory status: Process using {process_mb:.0f}MB, "
            f"System available: {available_mb:.0f}MB"
        )
