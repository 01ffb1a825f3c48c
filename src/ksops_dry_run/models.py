"""Data models for ksops-dry-run.

This module provides typed records for the two kinds of documents the plugin
reads, the ksops generator config and v1/Secret resources, replacing the raw
dictionaries produced by the YAML loader.

Decoding is structural: unknown fields are ignored and missing fields take
their empty value. Shape mismatches raise ValueError, which the parsers wrap
into their own error types.
"""

import datetime
from dataclasses import dataclass, field
from typing import Any


def _as_mapping(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


def _as_string(value: Any, what: str) -> str:
    """Coerce a YAML scalar into its string form.

    Args:
        value: The decoded scalar.
        what: Field description used in error messages.

    Returns:
        The string form of the scalar. Null decodes to the empty string and
        booleans use their YAML spelling. Timestamps use ISO 8601 and binary
        values are decoded as UTF-8.

    Raises:
        ValueError: If the value is a mapping or sequence.

    """
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case int() | float():
            return str(value)
        case datetime.date():
            return value.isoformat()
        case bytes():
            return value.decode("utf-8", errors="replace")
        case _:
            raise ValueError(f"{what} must be a string, got {type(value).__name__}")


def _as_string_map(value: Any, what: str) -> dict[str, str]:
    return {
        _as_string(key, f"{what} key"): _as_string(item, f"{what}.{key}")
        for key, item in _as_mapping(value, what).items()
    }


def _as_bool(value: Any, what: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{what} must be a boolean, got {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class ResourceIdentity:
    """The apiVersion/kind pair shared by every Kubernetes resource.

    Attributes:
        api_version: The resource apiVersion (e.g. 'v1').
        kind: The resource kind (e.g. 'Secret').

    """

    api_version: str
    kind: str

    @classmethod
    def from_dict(cls, document: dict[str, Any]) -> "ResourceIdentity":
        return cls(
            api_version=_as_string(document.get("apiVersion"), "apiVersion"),
            kind=_as_string(document.get("kind"), "kind"),
        )

    def __str__(self) -> str:
        return f"{self.api_version}/{self.kind}"


@dataclass(slots=True)
class ResourceMetadata:
    """Standard Kubernetes object metadata.

    Only labels are ever modified, to add the dry-run marker label.

    Attributes:
        name: The resource name.
        namespace: The resource namespace, empty when not set.
        labels: Resource labels.
        annotations: Resource annotations.

    """

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, value: Any) -> "ResourceMetadata":
        metadata = _as_mapping(value, "metadata")
        return cls(
            name=_as_string(metadata.get("name"), "metadata.name"),
            namespace=_as_string(metadata.get("namespace"), "metadata.namespace"),
            labels=_as_string_map(metadata.get("labels"), "metadata.labels"),
            annotations=_as_string_map(metadata.get("annotations"), "metadata.annotations"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.annotations:
            result["annotations"] = dict(self.annotations)
        if self.labels:
            result["labels"] = dict(self.labels)
        result["name"] = self.name
        if self.namespace:
            result["namespace"] = self.namespace
        return result


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """A ksops generator config as passed to the plugin by kustomize.

    Attributes:
        identity: The config apiVersion and kind.
        metadata: The generator metadata.
        files: Encrypted secret files, relative to the config root.

    """

    identity: ResourceIdentity
    metadata: ResourceMetadata
    files: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, document: Any) -> "GeneratorConfig":
        """Build a GeneratorConfig from a decoded YAML document.

        Raises:
            ValueError: If the document or one of its fields has the wrong shape.

        """
        document = _as_mapping(document, "document")
        files = document.get("files")
        if files is None:
            files = []
        if not isinstance(files, list):
            raise ValueError(f"files must be a list, got {type(files).__name__}")
        return cls(
            identity=ResourceIdentity.from_dict(document),
            metadata=ResourceMetadata.from_dict(document.get("metadata")),
            files=tuple(_as_string(name, "files entry") for name in files),
        )


@dataclass(slots=True)
class SecretResource:
    """A v1/Secret resource.

    Attributes:
        identity: The resource apiVersion and kind.
        metadata: The resource metadata.
        type: The secret type (e.g. 'Opaque'), empty when not set.
        string_data: Plain text values, keyed by name.
        data: Base64 encoded values, keyed by name.
        immutable: Whether the secret is immutable.

    """

    identity: ResourceIdentity
    metadata: ResourceMetadata = field(default_factory=ResourceMetadata)
    type: str = ""
    string_data: dict[str, str] = field(default_factory=dict)
    data: dict[str, str] = field(default_factory=dict)
    immutable: bool = False

    @classmethod
    def from_dict(cls, document: Any) -> "SecretResource":
        """Build a SecretResource from a decoded YAML document.

        Raises:
            ValueError: If the document or one of its fields has the wrong shape.

        """
        document = _as_mapping(document, "document")
        return cls(
            identity=ResourceIdentity.from_dict(document),
            metadata=ResourceMetadata.from_dict(document.get("metadata")),
            type=_as_string(document.get("type"), "type"),
            string_data=_as_string_map(document.get("stringData"), "stringData"),
            data=_as_string_map(document.get("data"), "data"),
            immutable=_as_bool(document.get("immutable"), "immutable"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the resource as a plain dictionary ready for YAML encoding.

        Empty optional fields are omitted.
        """
        result: dict[str, Any] = {
            "apiVersion": self.identity.api_version,
            "kind": self.identity.kind,
            "metadata": self.metadata.to_dict(),
        }
        if self.type:
            result["type"] = self.type
        if self.string_data:
            result["stringData"] = dict(self.string_data)
        if self.data:
            result["data"] = dict(self.data)
        if self.immutable:
            result["immutable"] = True
        return result
