"""JSON to TypeScript Generator

A Python package for inferring TypeScript interfaces and enums from
sample JSON documents. Handles nested objects, heterogeneous arrays,
string enums, camelCase property names and optional properties.
"""

__version__ = "0.3.0"

from .config import ConverterConfig
from .converter import DEFAULT_ROOT_NAME, convert, convert_text
from .errors import ConversionError, InvalidJsonError, JsonToTsError
from .inference import TypeInferrer, TypeRegistry
from .renderer import TypeScriptRenderer

__all__ = [
    "convert",
    "convert_text",
    "ConverterConfig",
    "DEFAULT_ROOT_NAME",
    "TypeInferrer",
    "TypeRegistry",
    "TypeScriptRenderer",
    "JsonToTsError",
    "InvalidJsonError",
    "ConversionError",
]
