"""Processors for the two conversion directions."""

from .marshaller import Marshaller
from .unmarshaller import Unmarshaller

__all__ = ["Marshaller", "Unmarshaller"]
