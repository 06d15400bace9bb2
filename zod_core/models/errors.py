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

"""Structured validation error records and their locations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union


JsonPointer = str


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


@dataclass(frozen=True)
class Key:
    """Object field traversal step."""

    name: str

    def __str__(self) -> str:
        return _jp_escape(str(self.name))


@dataclass(frozen=True)
class Index:
    """Array element traversal step."""

    index: int

    def __str__(self) -> str:
        return str(self.index)


PathSegment = Union[Key, Index]
Path = Tuple[PathSegment, ...]


def to_json_pointer(path: Iterable[PathSegment]) -> JsonPointer:
    """Render a path as a JSON pointer; the root is the empty string."""
    return "".join(f"/{segment}" for segment in path)


class ErrorCode(str, Enum):
    """Closed set of violation kinds. Each maps to exactly one check."""

    INVALID_TYPE = "invalid_type"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    MIN = "min"
    MAX = "max"
    REQUIRED = "required"
    MIN_ITEMS = "min_items"
    MAX_ITEMS = "max_items"
    ADDITIONAL_PROPERTY = "additional_property"


@dataclass(frozen=True)
class ValidationError:
    """A single violation found while validating a value."""

    path: Path
    code: ErrorCode
    message: str
    expected: Optional[Any] = None
    received: Optional[Any] = None

    @property
    def pointer(self) -> JsonPointer:
        return to_json_pointer(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": [segment.name if isinstance(segment, Key) else segment.index for segment in self.path],
            "pointer": self.pointer,
            "code": self.code.value,
            "message": self.message,
            "expected": self.expected,
            "received": self.received,
        }


__all__ = [
    "ErrorCode",
    "Index",
    "JsonPointer",
    "Key",
    "Path",
    "PathSegment",
    "ValidationError",
    "to_json_pointer",
]
