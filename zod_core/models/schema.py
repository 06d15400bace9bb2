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

"""Immutable schema model.

A schema is one of five frozen dataclasses. Together they form a closed set
(``SchemaSpec``); the engine dispatches on the concrete class. Bound ordering
(``min_length <= max_length`` and friends) is not checked here, see
``zod_core.linter`` for that.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import ClassVar, Iterable, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class StringSchema:
    type_name: ClassVar[str] = "string"

    min_length: Optional[int] = None
    max_length: Optional[int] = None


@dataclass(frozen=True)
class NumberSchema:
    type_name: ClassVar[str] = "number"

    min: Optional[float] = None
    max: Optional[float] = None


@dataclass(frozen=True)
class BooleanSchema:
    type_name: ClassVar[str] = "boolean"


@dataclass(frozen=True)
class ObjectSchema:
    type_name: ClassVar[str] = "object"

    properties: Mapping[str, "SchemaSpec"] = field(default_factory=dict, hash=False)
    # Ordered and de-duplicated; order drives the order of Required errors.
    required: Tuple[str, ...] = ()
    additional_properties: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "required", _unique(self.required))


@dataclass(frozen=True)
class ArraySchema:
    type_name: ClassVar[str] = "array"

    items: Optional["SchemaSpec"] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None


SchemaSpec = Union[StringSchema, NumberSchema, BooleanSchema, ObjectSchema, ArraySchema]

SCHEMA_TYPES: Tuple[type, ...] = (StringSchema, NumberSchema, BooleanSchema, ObjectSchema, ArraySchema)


def is_schema(obj: object) -> bool:
    return isinstance(obj, SCHEMA_TYPES)


def _unique(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(names))


__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "NumberSchema",
    "ObjectSchema",
    "SCHEMA_TYPES",
    "SchemaSpec",
    "StringSchema",
    "is_schema",
]
