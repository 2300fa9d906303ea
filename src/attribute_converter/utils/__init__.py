"""Utility functions for the Attribute Converter."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
