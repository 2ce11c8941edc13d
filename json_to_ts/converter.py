"""
Entry points of the JSON to TypeScript generator.

convert() runs inference and rendering over an already decoded value and
never raises for any value shape. convert_text() is the boundary used by
the command line: it decodes the text first and turns failures into
JsonToTsError subclasses.
"""

from __future__ import annotations

import json
from typing import Any

from .config import ConverterConfig
from .errors import ConversionError, InvalidJsonError
from .inference import TypeInferrer, TypeRegistry
from .renderer import TypeScriptRenderer
from .utils import sanitize_type_name

DEFAULT_ROOT_NAME = "RootObject"


def resolve_root_name(root_name: str) -> str:
    """Sanitize a user supplied root name, falling back to the default."""
    return sanitize_type_name(root_name or "") or DEFAULT_ROOT_NAME


def convert(value: Any, root_name: str = DEFAULT_ROOT_NAME, config: ConverterConfig | None = None) -> str:
    """
    Generate TypeScript definitions for a decoded JSON value.

    Args:
        value: Decoded JSON value (None, bool, int, float, str, list or dict)
        root_name: Name of the top level interface
        config: Generation options, defaults to ConverterConfig()

    Returns:
        Enum blocks (when enum detection is on) followed by interface blocks
    """
    if config is None:
        config = ConverterConfig()

    # One registry per call: concurrent conversions share no state
    registry = TypeRegistry()
    TypeInferrer(config, registry).infer(value, resolve_root_name(root_name))
    return TypeScriptRenderer(config).render(registry)


def convert_text(text: str | bytes, root_name: str = DEFAULT_ROOT_NAME, config: ConverterConfig | None = None) -> str:
    """
    Decode JSON text and generate TypeScript definitions for it.

    Raises:
        InvalidJsonError: The text is not valid JSON, conversion is not attempted
        ConversionError: Generation failed unexpectedly
    """
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidJsonError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise InvalidJsonError("Invalid JSON: document is nested too deeply to decode") from e

    try:
        return convert(value, root_name, config)
    except Exception as e:
        raise ConversionError("Failed to generate types from JSON") from e
