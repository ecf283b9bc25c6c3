"""Factor catalog defaults, validation and merging.

The catalog is the operator-tunable factor table of a project. It is kept
apart from the deriver tables in engine.factors: quotes are computed from the
deriver, the catalog is stored and served as-is.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from estate_pricing.errors import InvalidFactorError
from estate_pricing.schemas.catalog import (
    MAP_FIELDS,
    REQUIRED_KEYS,
    ROOM_COUNT_LABELS,
    SCALAR_FIELDS,
    FactorCatalog,
)

DEFAULT_SCALARS: Mapping[str, float] = MappingProxyType({name: 1.0 for name in SCALAR_FIELDS})

DEFAULT_DIRECTION_FACTORS: Mapping[str, float] = MappingProxyType({
    "north": 1.05,
    "south": 0.95,
    "east": 1.0,
    "west": 0.98,
    "northeast": 1.03,
    "northwest": 1.02,
    "southeast": 1.01,
    "southwest": 0.97,
})

DEFAULT_UNIT_TYPE_FACTORS: Mapping[str, float] = MappingProxyType({
    "studio": 0.9,
    "one_room": 0.95,
    "two_room": 1.0,
    "three_room": 1.0,
    "four_room": 1.05,
    "five_room": 1.1,
    "six_plus_room": 1.15,
    "penthouse": 1.3,
    "duplex": 1.2,
    "garden": 1.15,
    "mini_penthouse": 1.25,
})

DEFAULT_ROOM_COUNT_FACTORS: Mapping[str, float] = MappingProxyType(
    dict(zip(ROOM_COUNT_LABELS, (0.9, 0.95, 1.0, 1.02, 1.05, 1.08, 1.1, 1.13, 1.15, 1.18, 1.2)))
)


def default_catalog() -> FactorCatalog:
    """A fresh default catalog; callers may mutate its maps freely."""
    return FactorCatalog(
        **DEFAULT_SCALARS,
        direction_factor=dict(DEFAULT_DIRECTION_FACTORS),
        unit_type_factor=dict(DEFAULT_UNIT_TYPE_FACTORS),
        room_count_factor=dict(DEFAULT_ROOM_COUNT_FACTORS),
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _check_value(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidFactorError(f"{name} must be a number (got {value!r})")
    if not math.isfinite(value) or value <= 0:
        raise InvalidFactorError(f"{name} must be a finite positive number (got {value!r})")


def validate_catalog(catalog: FactorCatalog) -> None:
    """Reject catalogs with missing/unknown keys or non-positive values.

    Raises:
        InvalidFactorError: naming the first offending field or key.
    """
    for name in SCALAR_FIELDS:
        _check_value(name, getattr(catalog, name))

    for name in MAP_FIELDS:
        mapping = getattr(catalog, name)
        keys = set(mapping)
        required = REQUIRED_KEYS[name]
        missing = sorted(required - keys)
        if missing:
            raise InvalidFactorError(f"{name} is missing keys: {', '.join(missing)}")
        unknown = sorted(keys - required)
        if unknown:
            raise InvalidFactorError(f"{name} has unknown keys: {', '.join(unknown)}")
        for key, value in mapping.items():
            _check_value(f"{name}[{key}]", value)


# ---------------------------------------------------------------------------
# Building catalogs from payloads
# ---------------------------------------------------------------------------


def catalog_from_dict(data: Mapping[str, Any]) -> FactorCatalog:
    """Build a catalog from a full payload; absent fields are left empty."""
    return FactorCatalog(
        **{name: data.get(name) for name in SCALAR_FIELDS},
        **{name: dict(data.get(name) or {}) for name in MAP_FIELDS},
    )


def merge_catalog(base: FactorCatalog, overrides: Mapping[str, Any]) -> FactorCatalog:
    """Apply a partial edit on top of a complete catalog.

    Scalars are replaced; maps are merged key by key, so editing a single
    direction keeps the other seven.
    """
    unknown = set(overrides) - set(SCALAR_FIELDS) - set(MAP_FIELDS)
    if unknown:
        raise InvalidFactorError(f"unknown catalog fields: {', '.join(sorted(unknown))}")

    merged = base.to_dict()
    for name, value in overrides.items():
        if value is None:
            continue
        if name in MAP_FIELDS:
            merged[name] = {**merged[name], **value}
        else:
            merged[name] = value
    return catalog_from_dict(merged)
