"""
Configuration for the JSON to TypeScript generator.
"""

from __future__ import annotations

from dataclasses import dataclass

# Option names as spelled in JSON config files written for the web form
_CAMEL_CASE_ALIASES = {
    "detectEnums": "detect_enums",
    "camelCase": "camel_case",
    "markOptional": "mark_optional",
    "strictNullChecks": "strict_null_checks",
}


@dataclass
class ConverterConfig:
    """Configuration options for type generation."""

    # Arrays made only of strings become an enum instead of string[]
    detect_enums: bool = False

    # Rewrite snake_case property names (and nested type names) to camelCase
    camel_case: bool = False

    # Append "?" to every property
    mark_optional: bool = False

    # Type null values as "null" instead of "any"
    strict_null_checks: bool = True

    @staticmethod
    def from_dict(d: dict) -> ConverterConfig:
        """Create a config from a dictionary, accepting either naming style."""
        config = ConverterConfig()
        for k, v in d.items():
            k = _CAMEL_CASE_ALIASES.get(k, k)
            if hasattr(config, k):
                if not isinstance(v, bool):
                    raise TypeError(f"Expected {k} to be a boolean, got {type(v).__name__}")
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "detect_enums": self.detect_enums,
            "camel_case": self.camel_case,
            "mark_optional": self.mark_optional,
            "strict_null_checks": self.strict_null_checks,
        }
