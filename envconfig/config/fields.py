"""Dataclass field metadata keys read by the metadata provider."""

ENV_METADATA_KEY = "env"  # Environment variable name; empty or absent = not bound
DEFAULT_METADATA_KEY = "default"  # Literal default string used when the variable is unset
KIND_METADATA_KEY = "kind"  # Optional FieldKind override


__all__ = [
    "ENV_METADATA_KEY",
    "DEFAULT_METADATA_KEY",
    "KIND_METADATA_KEY",
]
