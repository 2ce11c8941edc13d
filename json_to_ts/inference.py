"""
Type inference over decoded JSON values.

Walks a JSON value, classifies every node and accumulates the record
(interface) and enum definitions it discovers into a TypeRegistry:

1. Walk: each node becomes a type expression ("string", "Foo[]", ...)
2. Accumulate: objects and string-only arrays register named definitions

The walk runs on an explicit work stack, so arbitrarily deep documents
are bounded by memory rather than by the interpreter recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .config import ConverterConfig
from .utils import capitalize_first, sanitize_type_name, to_camel_case

ROOT_PATH = 0

# Path steps
_ITEM_STEP = ("item",)


def _key_step(key: str) -> tuple[str, str]:
    return ("key", key)


@dataclass
class TypeRegistry:
    """Named definitions collected during one conversion.

    Names are claimed per structural path: nodes at the same path (every
    object inside one array, for instance) share a name, while different
    paths that would produce the same name get a numeric suffix.
    """

    # Record name -> original property key -> type expression
    records: dict[str, dict[str, str]] = field(default_factory=dict)

    # Enum name -> distinct values in first-seen order
    enums: dict[str, list[str]] = field(default_factory=dict)

    # (parent path id, step) -> child path id
    _paths: dict[tuple[int, tuple], int] = field(default_factory=dict)

    # (kind, path id) -> claimed name
    _names: dict[tuple[str, int], str] = field(default_factory=dict)

    _taken: set[str] = field(default_factory=set)

    def child_path(self, parent: int, step: tuple) -> int:
        """Intern a path step and return the id of the child path."""
        path = self._paths.get((parent, step))
        if path is None:
            path = len(self._paths) + 1
            self._paths[(parent, step)] = path
        return path

    def _claim(self, kind: str, path: int, candidate: str) -> str:
        name = self._names.get((kind, path))
        if name is not None:
            return name

        name = candidate
        suffix = 2
        while name in self._taken:
            name = f"{candidate}{suffix}"
            suffix += 1

        self._names[(kind, path)] = name
        self._taken.add(name)
        return name

    def register_record(self, path: int, candidate: str) -> str:
        """Claim a record name and reserve its position in definition order."""
        name = self._claim("record", path, candidate)
        self.records.setdefault(name, {})
        return name

    def set_record_properties(self, name: str, properties: dict[str, str]) -> None:
        # Last write wins; the record keeps the position it was reserved at
        self.records[name] = properties

    def register_enum(self, path: int, candidate: str, values: list[str]) -> str:
        """Claim an enum name and add any values it does not hold yet."""
        name = self._claim("enum", path, candidate)
        members = self.enums.setdefault(name, [])
        seen = set(members)
        for value in values:
            if value not in seen:
                seen.add(value)
                members.append(value)
        return name


def unify_array_types(element_types: list[str]) -> str:
    """Build the array type for a list of element type expressions.

    Examples:
        ["number", "number"] -> "number[]"
        ["number", "string", "number"] -> "(number | string)[]"
    """
    distinct = list(dict.fromkeys(element_types))
    if len(distinct) == 1:
        return f"{distinct[0]}[]"
    return f"({' | '.join(distinct)})[]"


@dataclass
class _ArrayFrame:
    """An array whose elements are being walked."""

    children: Iterator[tuple[Any, str, int]]
    types: list[str] = field(default_factory=list)

    def close(self, registry: TypeRegistry) -> str:
        return unify_array_types(self.types)


@dataclass
class _ObjectFrame:
    """An object whose properties are being walked."""

    name: str
    keys: list[str]
    children: Iterator[tuple[Any, str, int]]
    types: list[str] = field(default_factory=list)

    def close(self, registry: TypeRegistry) -> str:
        registry.set_record_properties(self.name, dict(zip(self.keys, self.types)))
        return self.name


class TypeInferrer:
    """Infers type expressions and fills a TypeRegistry."""

    def __init__(self, config: ConverterConfig, registry: TypeRegistry | None = None):
        self.config = config
        self.registry = registry if registry is not None else TypeRegistry()

    def infer(self, value: Any, name: str) -> str:
        """
        Infer the type expression of a JSON value.

        Args:
            value: Decoded JSON value
            name: Type name used for the value if it is an object, and as
                the prefix of every nested type name

        Returns:
            The type expression of the value
        """
        visited = self._visit(value, name, ROOT_PATH)
        if isinstance(visited, str):
            return visited

        stack: list[_ArrayFrame | _ObjectFrame] = [visited]
        while True:
            frame = stack[-1]
            child = next(frame.children, None)
            if child is not None:
                visited = self._visit(*child)
                if isinstance(visited, str):
                    frame.types.append(visited)
                else:
                    stack.append(visited)
                continue

            stack.pop()
            expression = frame.close(self.registry)
            if not stack:
                return expression
            stack[-1].types.append(expression)

    def _visit(self, value: Any, name: str, path: int) -> str | _ArrayFrame | _ObjectFrame:
        """Classify a node: leaves give their expression, containers a frame to walk."""
        if value is None:
            return "null" if self.config.strict_null_checks else "any"
        # bool before number: bool is an int subclass
        if isinstance(value, bool):
            return "boolean"
        if isinstance(value, (int, float)):
            return "number"
        if isinstance(value, str):
            return "string"

        if isinstance(value, (list, tuple)):
            if not value:
                return "any[]"
            if self.config.detect_enums and all(isinstance(item, str) for item in value):
                enum_name = self.registry.register_enum(path, sanitize_type_name(f"{name}Enum"), list(value))
                return f"{enum_name}[]"
            return _ArrayFrame(self._array_children(value, name, path))

        if isinstance(value, dict):
            record_name = self.registry.register_record(path, sanitize_type_name(name))
            return _ObjectFrame(record_name, [str(key) for key in value], self._object_children(value, record_name, path))

        return "any"

    def _array_children(self, items: list | tuple, name: str, path: int) -> Iterator[tuple[Any, str, int]]:
        item_name = f"{name}Item"
        item_path = self.registry.child_path(path, _ITEM_STEP)
        for item in items:
            yield item, item_name, item_path

    def _object_children(self, obj: dict, record_name: str, path: int) -> Iterator[tuple[Any, str, int]]:
        for key, value in obj.items():
            key = str(key)
            child_name = record_name + capitalize_first(self.property_name(key))
            yield value, child_name, self.registry.child_path(path, _key_step(key))

    def property_name(self, key: str) -> str:
        """Property key as written in the output (before quoting)."""
        if self.config.camel_case:
            return to_camel_case(key)
        return key
