"""
Serializers that render normalized BOMs as text documents.
"""

from .base_serializer import BaseSerializer, SerializerOptions
from .json_serializer import JsonSerializer, make_json_serializer

__all__ = [
    "BaseSerializer",
    "SerializerOptions",
    "JsonSerializer",
    "make_json_serializer"
]
