# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Validation engine.

``validate`` walks a schema and a value in lockstep and collects every
violation instead of stopping at the first one. A single accumulator (current
path + error list) is shared by the whole walk; each descent pushes one path
segment and pops it on the way back out.

Error order is depth-first in schema order: within an object, missing
required keys come first (declaration order), then the present keys in the
value's own order; within an array, the bound checks come first, then the
elements by ascending index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from .config import validator_config
from .exceptions import MaxDepthExceededError, SchemaDefinitionError, SchemaValidationError
from .models.errors import ErrorCode, Index, Key, PathSegment, ValidationError, to_json_pointer
from .models.schema import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaSpec,
    StringSchema,
    is_schema,
)
from .report import ROOT_LABEL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one ``validate`` call. Truthy iff the value conforms."""

    errors: Tuple[ValidationError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.ok


def value_type_name(value: Any) -> str:
    """Name the dynamic kind of ``value`` the way error messages report it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class _ValidationContext:
    """Path stack and error list shared by one validation call."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        self.path: List[PathSegment] = []
        self.errors: List[ValidationError] = []

    def add(
        self,
        code: ErrorCode,
        message: str,
        *,
        expected: Any = None,
        received: Any = None,
        segment: Optional[PathSegment] = None,
    ) -> None:
        path = tuple(self.path) if segment is None else (*self.path, segment)
        self.errors.append(ValidationError(path, code, message, expected, received))

    def enter(self, segment: PathSegment) -> None:
        if len(self.path) >= self.max_depth:
            raise MaxDepthExceededError(self.max_depth, (*self.path, segment))
        self.path.append(segment)

    def leave(self) -> None:
        self.path.pop()


def _validate_node(schema: SchemaSpec, value: Any, ctx: _ValidationContext) -> None:
    if isinstance(schema, StringSchema) and isinstance(value, str):
        _validate_string(schema, value, ctx)
    elif isinstance(schema, NumberSchema) and _is_number(value):
        _validate_number(schema, value, ctx)
    elif isinstance(schema, BooleanSchema) and isinstance(value, bool):
        pass
    elif isinstance(schema, ObjectSchema) and isinstance(value, Mapping):
        _validate_object(schema, value, ctx)
    elif isinstance(schema, ArraySchema) and isinstance(value, (list, tuple)):
        _validate_array(schema, value, ctx)
    elif is_schema(schema):
        expected = schema.type_name
        received = value_type_name(value)
        ctx.add(
            ErrorCode.INVALID_TYPE,
            f"Expected {expected}, received {received}",
            expected=expected,
            received=received,
        )
    else:
        location = to_json_pointer(ctx.path) or ROOT_LABEL
        raise SchemaDefinitionError(f"Unknown schema spec {type(schema).__name__} at {location}")


def _validate_string(schema: StringSchema, value: str, ctx: _ValidationContext) -> None:
    # Bounds count UTF-8 bytes, not code points.
    length = len(value.encode("utf-8"))
    if schema.min_length is not None and length < schema.min_length:
        ctx.add(
            ErrorCode.MIN_LENGTH,
            f"String must contain at least {schema.min_length} byte(s)",
            expected=schema.min_length,
            received=length,
        )
    if schema.max_length is not None and length > schema.max_length:
        ctx.add(
            ErrorCode.MAX_LENGTH,
            f"String must contain at most {schema.max_length} byte(s)",
            expected=schema.max_length,
            received=length,
        )


def _validate_number(schema: NumberSchema, value: float, ctx: _ValidationContext) -> None:
    if schema.min is not None and value < schema.min:
        ctx.add(
            ErrorCode.MIN,
            f"Number must be greater than or equal to {schema.min}",
            expected=schema.min,
            received=value,
        )
    if schema.max is not None and value > schema.max:
        ctx.add(
            ErrorCode.MAX,
            f"Number must be less than or equal to {schema.max}",
            expected=schema.max,
            received=value,
        )


def _validate_object(schema: ObjectSchema, value: Mapping[str, Any], ctx: _ValidationContext) -> None:
    for name in schema.required:
        if name not in value:
            declared = schema.properties.get(name)
            ctx.add(
                ErrorCode.REQUIRED,
                f"Missing required property '{name}'",
                expected=declared.type_name if declared is not None else None,
                received="undefined",
                segment=Key(name),
            )

    for key, item in value.items():
        prop_schema = schema.properties.get(key)
        if prop_schema is not None:
            ctx.enter(Key(key))
            _validate_node(prop_schema, item, ctx)
            ctx.leave()
        elif not schema.additional_properties:
            ctx.add(
                ErrorCode.ADDITIONAL_PROPERTY,
                f"Unexpected property '{key}'",
                received=value_type_name(item),
                segment=Key(key),
            )


def _validate_array(schema: ArraySchema, value: Sequence[Any], ctx: _ValidationContext) -> None:
    count = len(value)
    if schema.min_items is not None and count < schema.min_items:
        ctx.add(
            ErrorCode.MIN_ITEMS,
            f"Array must contain at least {schema.min_items} item(s)",
            expected=schema.min_items,
            received=count,
        )
    if schema.max_items is not None and count > schema.max_items:
        ctx.add(
            ErrorCode.MAX_ITEMS,
            f"Array must contain at most {schema.max_items} item(s)",
            expected=schema.max_items,
            received=count,
        )

    if schema.items is None:
        return
    for idx, item in enumerate(value):
        ctx.enter(Index(idx))
        _validate_node(schema.items, item, ctx)
        ctx.leave()


def validate(schema: SchemaSpec, value: Any, *, max_depth: Optional[int] = None) -> ValidationResult:
    """Validate ``value`` against ``schema`` and collect every violation.

    Args:
        schema: Schema built with ``zod_core.builder`` (or the model classes).
        value: Parsed JSON-like data. It is never modified.
        max_depth: Deepest allowed nesting below the root. Defaults to
            ``validator_config.max_depth``.

    Returns:
        A ``ValidationResult``; ``result.errors`` is empty on success.

    Raises:
        MaxDepthExceededError: If ``value`` nests deeper than ``max_depth``
            along a path the schema descends into (e.g. cyclic data).
        SchemaDefinitionError: If ``schema`` is not a schema.
    """
    if not is_schema(schema):
        hint = " (did you forget to call .build()?)" if hasattr(schema, "build") else ""
        raise SchemaDefinitionError(f"Expected a schema, got {type(schema).__name__}{hint}")

    depth_limit = validator_config.max_depth if max_depth is None else max_depth
    if depth_limit <= 0:
        raise ValueError(f"max_depth must be a positive integer, got {depth_limit}")

    ctx = _ValidationContext(depth_limit)
    _validate_node(schema, value, ctx)

    logger.debug(f"Validated {schema.type_name} schema: {len(ctx.errors)} error(s)")
    return ValidationResult(errors=tuple(ctx.errors))


def is_valid(schema: SchemaSpec, value: Any, *, max_depth: Optional[int] = None) -> bool:
    return validate(schema, value, max_depth=max_depth).ok


def assert_valid(schema: SchemaSpec, value: Any, *, max_depth: Optional[int] = None) -> Any:
    """Return ``value`` unchanged if it conforms, otherwise raise ``SchemaValidationError``."""
    result = validate(schema, value, max_depth=max_depth)
    if not result.ok:
        raise SchemaValidationError(result.errors)
    return value


__all__ = [
    "ValidationResult",
    "assert_valid",
    "is_valid",
    "validate",
    "value_type_name",
]
