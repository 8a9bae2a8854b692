"""Conversion options data model."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ConversionOptions:
    """Flags controlling which constructs are rendered.

    No flag has a built-in default: callers either pass every flag
    explicitly or use uniform()/from_dict() with their own default.

    Attributes:
        include_tables: Render tables as pipe tables (skip them otherwise)
        preserve_links: Render internal article links as Markdown links
        include_images: Render images as Markdown images
        include_math: Render formulas as $...$ / $$...$$ (plain text otherwise)
        include_frontmatter: Prepend a YAML metadata block
    """
    include_tables: bool
    preserve_links: bool
    include_images: bool
    include_math: bool
    include_frontmatter: bool

    # Wire (camelCase) key -> attribute name
    WIRE_KEYS = {
        'includeTables': 'include_tables',
        'preserveLinks': 'preserve_links',
        'includeImages': 'include_images',
        'includeMath': 'include_math',
        'includeFrontmatter': 'include_frontmatter',
    }

    @classmethod
    def uniform(cls, value: bool) -> 'ConversionOptions':
        """Build options with every flag set to ``value``."""
        return cls(**{name: value for name in cls.WIRE_KEYS.values()})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default: bool) -> 'ConversionOptions':
        """Build options from a mapping with camelCase or snake_case keys.

        Args:
            data: Mapping of option names to values
            default: Value used for any flag missing from ``data``

        Returns:
            ConversionOptions instance

        Raises:
            ValueError: If a supplied value is not a bool
        """
        values = {}
        for wire_key, name in cls.WIRE_KEYS.items():
            key = wire_key if wire_key in data else name
            if key not in data:
                values[name] = default
                continue
            value = data[key]
            # No truthiness coercion: "false" and 0 are rejected
            if not isinstance(value, bool):
                raise ValueError(f"option '{key}' must be true or false, got {value!r}")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, bool]:
        """Serialize to the camelCase wire form."""
        return {
            wire_key: getattr(self, name)
            for wire_key, name in self.WIRE_KEYS.items()
        }
