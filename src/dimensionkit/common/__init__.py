"""JSON helpers shared by the loader and the CLI."""

from dimensionkit.common.canonical_json import canonical_dumps_str, canonicalize
from dimensionkit.common.schema_validate import load_schema, validate_json

__all__ = ["canonical_dumps_str", "canonicalize", "load_schema", "validate_json"]
