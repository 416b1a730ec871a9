"""
Validators for rdfmeta inputs.

Usage:
    from rdfmeta.core.validators import InputValidator
"""

from .input import InputValidator

__all__ = ['InputValidator']
