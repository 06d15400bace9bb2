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

"""Fluent builders for schema construction.

Example::

    from zod_core import builder as z

    user = (
        z.object()
        .property("name", z.string().min_length(1).build())
        .property("age", z.number().min(0).build())
        .required("name")
        .strict()
        .build()
    )

Builders only check that each argument can be stored in a schema. They never
compare bounds with each other.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from .exceptions import SchemaDefinitionError
from .models.schema import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaSpec,
    StringSchema,
    is_schema,
)


def _count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaDefinitionError(f"'{name}' must be a non-negative integer, got {type(value).__name__}: {value!r}")
    if value < 0:
        raise SchemaDefinitionError(f"'{name}' must be a non-negative integer, got {value}")
    return value


def _bound(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaDefinitionError(f"'{name}' must be a number, got {type(value).__name__}: {value!r}")
    if isinstance(value, float) and math.isnan(value):
        raise SchemaDefinitionError(f"'{name}' must not be NaN")
    return value


def _schema(value: Any, name: str) -> SchemaSpec:
    if not is_schema(value):
        hint = " (did you forget to call .build()?)" if isinstance(value, _Builder) else ""
        raise SchemaDefinitionError(f"'{name}' must be a schema, got {type(value).__name__}{hint}")
    return value


class _Builder:
    def build(self) -> SchemaSpec:
        raise NotImplementedError


class StringBuilder(_Builder):
    def __init__(self) -> None:
        self._min_length: Optional[int] = None
        self._max_length: Optional[int] = None

    def min_length(self, min_length: int) -> "StringBuilder":
        self._min_length = _count(min_length, "min_length")
        return self

    def max_length(self, max_length: int) -> "StringBuilder":
        self._max_length = _count(max_length, "max_length")
        return self

    def build(self) -> StringSchema:
        return StringSchema(min_length=self._min_length, max_length=self._max_length)


class NumberBuilder(_Builder):
    def __init__(self) -> None:
        self._min: Optional[float] = None
        self._max: Optional[float] = None

    def min(self, minimum: float) -> "NumberBuilder":
        self._min = _bound(minimum, "min")
        return self

    def max(self, maximum: float) -> "NumberBuilder":
        self._max = _bound(maximum, "max")
        return self

    def build(self) -> NumberSchema:
        return NumberSchema(min=self._min, max=self._max)


class BooleanBuilder(_Builder):
    def build(self) -> BooleanSchema:
        return BooleanSchema()


class ObjectBuilder(_Builder):
    def __init__(self) -> None:
        self._properties: Dict[str, SchemaSpec] = {}
        self._required: List[str] = []
        self._additional_properties = True

    def property(self, name: str, schema: SchemaSpec) -> "ObjectBuilder":
        """Declare (or replace) the schema for ``name``."""
        if not isinstance(name, str):
            raise SchemaDefinitionError(f"Property name must be a string, got {type(name).__name__}: {name!r}")
        self._properties[name] = _schema(schema, f"property '{name}'")
        return self

    def required(self, *names: str) -> "ObjectBuilder":
        """Mark one or more keys as required.

        A required key does not need a declared property schema.
        """
        for name in names:
            if not isinstance(name, str):
                raise SchemaDefinitionError(f"Required name must be a string, got {type(name).__name__}: {name!r}")
            if name not in self._required:
                self._required.append(name)
        return self

    def strict(self) -> "ObjectBuilder":
        """Reject keys that have no declared property schema."""
        self._additional_properties = False
        return self

    def build(self) -> ObjectSchema:
        return ObjectSchema(
            properties=self._properties,
            required=tuple(self._required),
            additional_properties=self._additional_properties,
        )


class ArrayBuilder(_Builder):
    def __init__(self) -> None:
        self._items: Optional[SchemaSpec] = None
        self._min_items: Optional[int] = None
        self._max_items: Optional[int] = None

    def items(self, schema: SchemaSpec) -> "ArrayBuilder":
        self._items = _schema(schema, "items")
        return self

    def min_items(self, min_items: int) -> "ArrayBuilder":
        self._min_items = _count(min_items, "min_items")
        return self

    def max_items(self, max_items: int) -> "ArrayBuilder":
        self._max_items = _count(max_items, "max_items")
        return self

    def build(self) -> ArraySchema:
        return ArraySchema(items=self._items, min_items=self._min_items, max_items=self._max_items)


def string() -> StringBuilder:
    return StringBuilder()


def number() -> NumberBuilder:
    return NumberBuilder()


def boolean() -> BooleanBuilder:
    return BooleanBuilder()


def object() -> ObjectBuilder:  # noqa: A001
    return ObjectBuilder()


def array() -> ArrayBuilder:
    return ArrayBuilder()


__all__ = [
    "ArrayBuilder",
    "BooleanBuilder",
    "NumberBuilder",
    "ObjectBuilder",
    "StringBuilder",
    "array",
    "boolean",
    "number",
    "object",
    "string",
]
