from __future__ import annotations

import json
import math
from dataclasses import asdict, is_dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, Mapping

Path = tuple[str, ...]
JsonLike = Any


def _to_primitive(obj: JsonLike) -> JsonLike:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Fraction):
        return str(obj) if obj.denominator != 1 else obj.numerator
    return obj


def canonicalize(
    obj: JsonLike,
    *,
    drop_keys: set[str] | None = None,
    _path: Path = (),
) -> JsonLike:
    """Reduce ``obj`` to JSON primitives with string keys.

    ``None`` values inside mappings are dropped, as are keys listed in
    ``drop_keys``. Integral floats are kept as floats; non-finite floats are
    rejected.
    """
    drop_keys = drop_keys or set()
    obj = _to_primitive(obj)

    if isinstance(obj, Mapping):
        out: dict[str, JsonLike] = {}
        for k, v in obj.items():
            ks = k if isinstance(k, str) else str(k)
            if ks in drop_keys:
                continue
            canon_v = canonicalize(v, drop_keys=drop_keys, _path=_path + (ks,))
            if canon_v is None:
                continue
            out[ks] = canon_v
        return out

    if isinstance(obj, (list, tuple)):
        return [
            canonicalize(item, drop_keys=drop_keys, _path=_path + (str(i),))
            for i, item in enumerate(obj)
        ]

    if isinstance(obj, float) and not math.isfinite(obj):
        raise ValueError(f"non-finite number at {'/'.join(_path) or '<root>'}")

    if isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj

    return str(obj)


def canonical_dumps_str(obj: Any, *, indent: int | None = None) -> str:
    if indent is None:
        return json.dumps(
            canonicalize(obj),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
    return json.dumps(canonicalize(obj), sort_keys=True, indent=indent, ensure_ascii=False)


__all__ = ["canonicalize", "canonical_dumps_str"]
