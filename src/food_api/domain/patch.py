"""Patch documents for partial food updates.

A patch document is an ordered list of JSON Patch style operations, e.g.::

    [{"op": "replace", "path": "/calories", "value": 110}]

Only the mutable food fields can be targeted. ``add`` and ``replace`` both set
the field, ``remove`` resets it to its empty value and ``test`` asserts the
current value before later operations run.
"""

import re
from dataclasses import replace
from typing import Literal

from pydantic import BaseModel

from food_api.domain.foods import FoodEntity
from food_api.errors import ValidationError

PATCHABLE_FIELDS = ("name", "calories", "type")
READ_ONLY_FIELDS = ("id", "created")
_INTEGER = re.compile(r"\s*-?[0-9]+\s*")

_EMPTY_VALUES: dict[str, object] = {"name": "", "calories": 0, "type": None}


class PatchOperation(BaseModel):
    """Single field-level operation of a patch document."""

    op: Literal["add", "replace", "remove", "test"]
    path: str
    value: object | None = None


def apply_patch(food: FoodEntity, operations: list[PatchOperation]) -> FoodEntity:
    """Apply operations in order and return the patched copy."""
    patched = food
    for operation in operations:
        field_name = _resolve_field(operation.path)
        if operation.op == "test":
            if getattr(patched, field_name) != _coerce(field_name, operation.value):
                raise ValidationError(f"Test failed for path '{operation.path}'.")
            continue
        if operation.op == "remove":
            value = _EMPTY_VALUES[field_name]
        else:
            value = _coerce(field_name, operation.value)
        patched = replace(patched, **{field_name: value})
    return patched


def _resolve_field(path: str) -> str:
    if not path.startswith("/"):
        raise ValidationError(f"Invalid patch path '{path}'.")
    field_name = path[1:].strip().lower()
    if field_name in READ_ONLY_FIELDS:
        raise ValidationError(f"Field '{field_name}' cannot be patched.")
    if field_name not in PATCHABLE_FIELDS:
        raise ValidationError(f"Unknown field '{path[1:]}'.")
    return field_name


def _coerce(field_name: str, value: object) -> object:
    if field_name == "calories":
        if isinstance(value, bool):
            raise ValidationError("Calories must be an integer.")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INTEGER.fullmatch(value):
            try:
                return int(value)
            except ValueError as exc:
                raise ValidationError("Calories must be an integer.") from exc
        raise ValidationError("Calories must be an integer.")
    if field_name == "type" and value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Field '{field_name}' must be a string.")
    return value
