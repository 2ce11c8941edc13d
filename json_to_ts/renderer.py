"""
TypeScript renderer.

Serializes a TypeRegistry into enum and interface blocks using the
Jinja2 templates under templates/typescript.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jinja2

from .config import ConverterConfig
from .inference import TypeRegistry
from .utils import enum_member_key, is_bare_property_name, to_camel_case


def ts_string_literal(value: str) -> str:
    """Quote a string as a TypeScript string literal."""
    return json.dumps(value, ensure_ascii=False)


class TypeScriptRenderer:
    """Renders enums first (when enabled), then interfaces."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    def __init__(self, config: ConverterConfig):
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["ts_string"] = ts_string_literal

        self.enum_template = self.jinja_env.get_template(f"enum.{self.FILE_EXTENSION}.jinja2")
        self.interface_template = self.jinja_env.get_template(f"interface.{self.FILE_EXTENSION}.jinja2")

    def render(self, registry: TypeRegistry) -> str:
        """
        Render every registered definition.

        Enums are skipped entirely when enum detection is off. Blocks are
        separated by a blank line and the result has no trailing whitespace.
        """
        blocks = []
        if self.config.detect_enums:
            for name, values in registry.enums.items():
                blocks.append(self.enum_template.render(ENUM_NAME=name, members=self._prepare_enum_members(values)))
        for name, properties in registry.records.items():
            blocks.append(
                self.interface_template.render(
                    INTERFACE_NAME=name,
                    properties=self._prepare_properties(properties),
                    OPTIONAL=self.config.mark_optional,
                )
            )
        return "\n\n".join(blocks).rstrip()

    def _prepare_enum_members(self, values: list[str]) -> list[dict[str, Any]]:
        # Distinct values may still collide once sanitized ("a-b" and "a b")
        members = []
        used: set[str] = set()
        for value in values:
            base = enum_member_key(value)
            key = base
            suffix = 2
            while key in used:
                key = f"{base}{suffix}"
                suffix += 1
            used.add(key)
            members.append({"key": key, "value": value})
        return members

    def _prepare_properties(self, properties: dict[str, str]) -> list[dict[str, Any]]:
        # The camelCase rewrite can map two keys onto one ("user_name" and "userName")
        prepared = []
        used: set[str] = set()
        for key, type_expression in properties.items():
            base = self._rewrite_key(key)
            name = base
            suffix = 2
            while name in used:
                name = f"{base}{suffix}"
                suffix += 1
            used.add(name)
            prepared.append({"key": self._quote_key(name), "type": type_expression})
        return prepared

    def format_property_key(self, key: str) -> str:
        """Apply the camelCase rewrite, then quote keys that are not bare identifiers."""
        return self._quote_key(self._rewrite_key(key))

    def _rewrite_key(self, key: str) -> str:
        if self.config.camel_case:
            return to_camel_case(key)
        return key

    def _quote_key(self, key: str) -> str:
        if not is_bare_property_name(key):
            return ts_string_literal(key)
        return key
