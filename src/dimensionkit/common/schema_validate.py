from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict

import jsonschema
from jsonschema.exceptions import best_match


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    text = resources.files("dimensionkit.schemas").joinpath(schema_name).read_text(encoding="utf-8")
    schema = json.loads(text)
    jsonschema.Draft202012Validator.check_schema(schema)
    return schema


def validate_json(instance: Any, schema_name: str) -> None:
    """Raise the most relevant ``jsonschema.ValidationError`` for ``instance``."""
    validator = jsonschema.Draft202012Validator(load_schema(schema_name))
    error = best_match(validator.iter_errors(instance))
    if error is not None:
        raise error
