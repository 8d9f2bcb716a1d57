"""Configuration classes for Print Schema reading and writing.

This module provides configuration objects for the reader and the writer,
validated on construction and combinable into one immutable
``PrintSchemaConfig`` that can be stored as JSON.
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

SUPPORTED_ENCODINGS = ("UTF-8", "UTF-16")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ReaderConfig:
    """Configuration for parsing Print Schema documents."""

    # Print Schema trees are shallow; anything deeper is almost certainly hostile
    max_depth: int = 256
    huge_tree: bool = False

    def __post_init__(self) -> None:
        """Validate reader configuration."""
        if self.max_depth <= 0:
            raise ConfigValidationError("max_depth must be > 0", field_name="max_depth")


@dataclass(frozen=True)
class WriterConfig:
    """Configuration for serializing Print Schema documents."""

    xml_declaration: bool = True
    encoding: str = "UTF-8"
    pretty_print: bool = False

    def __post_init__(self) -> None:
        """Validate writer configuration."""
        if self.encoding.upper() not in SUPPORTED_ENCODINGS:
            raise ConfigValidationError(
                f"encoding must be one of {list(SUPPORTED_ENCODINGS)}",
                field_name="encoding",
                suggestions=["Use UTF-8 unless the consumer requires UTF-16"],
            )


@dataclass(frozen=True)
class PrintSchemaConfig:
    """Complete configuration for reader and writer.

    Thread-safe due to frozen dataclass implementation; one instance can be
    shared by parsers running on several threads.
    """

    reader: ReaderConfig = field(default_factory=ReaderConfig)
    writer: WriterConfig = field(default_factory=WriterConfig)
    correlation_id: Optional[str] = None
    name: Optional[str] = None

    def override(self, **kwargs: Any) -> "PrintSchemaConfig":
        """Create a new configuration with specific overrides.

        Nested fields use a double underscore, e.g. ``reader__max_depth=64``.

        Example:
            >>> config = PrintSchemaConfig().override(
            ...     writer__pretty_print=True,
            ...     correlation_id="printer-1",
            ... )
        """
        nested: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in ("reader", "writer"):
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                    )
                nested.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        for component, overrides in nested.items():
            try:
                top_level[component] = replace(getattr(self, component), **overrides)
            except TypeError as e:
                raise ConfigValidationError(str(e), field_name=component) from e

        return replace(self, **top_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "reader": {f.name: getattr(self.reader, f.name) for f in fields(self.reader)},
            "writer": {f.name: getattr(self.writer, f.name) for f in fields(self.writer)},
            "correlation_id": self.correlation_id,
            "name": self.name,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrintSchemaConfig":
        """Create configuration from dictionary.

        Unknown keys raise ``ConfigValidationError`` instead of being dropped.
        """
        try:
            return cls(
                reader=ReaderConfig(**data.get("reader", {})),
                writer=WriterConfig(**data.get("writer", {})),
                correlation_id=data.get("correlation_id"),
                name=data.get("name"),
            )
        except TypeError as e:
            raise ConfigValidationError(f"Invalid configuration data: {e}") from e

    @classmethod
    def from_json(cls, json_str: str) -> "PrintSchemaConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def default(cls) -> "PrintSchemaConfig":
        """Compact output, conservative reader limits."""
        return cls(name="default")

    @classmethod
    def readable(cls) -> "PrintSchemaConfig":
        """Pretty printed output for humans diffing tickets."""
        return cls(writer=WriterConfig(pretty_print=True), name="readable")

    @classmethod
    def large_documents(cls) -> "PrintSchemaConfig":
        """Reader preset for vendor capabilities with very large option sets."""
        return cls(
            reader=ReaderConfig(max_depth=1024, huge_tree=True),
            name="large_documents",
        )
