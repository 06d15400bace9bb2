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

"""Consistency checks for schemas.

Schemas accept any combination of bounds. This linter points out the
combinations that no value can ever satisfy, without changing how the engine
treats them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .models.errors import JsonPointer, Key, to_json_pointer
from .models.schema import ArraySchema, NumberSchema, ObjectSchema, SchemaSpec, StringSchema


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    schema_path: Optional[JsonPointer] = None


def _bounds_issue(low, high, low_name: str, high_name: str, path: List[str]) -> Optional[SchemaIssue]:
    # NaN compares false both ways, so a NaN bound never rejects a value.
    if low is None or high is None or not low > high:
        return None
    return SchemaIssue(
        message=f"'{low_name}' ({low}) is greater than '{high_name}' ({high}); no value can satisfy both",
        schema_path=to_json_pointer(Key(p) for p in path),
    )


def lint_schema(schema: SchemaSpec) -> List[SchemaIssue]:
    """Return every unsatisfiable constraint in ``schema``, outermost first.

    ``schema_path`` uses the same keywords as schema documents, e.g.
    ``/properties/tags/items``.
    """
    issues: List[SchemaIssue] = []
    _lint(schema, [], issues)
    return issues


def _lint(schema: SchemaSpec, path: List[str], issues: List[SchemaIssue]) -> None:
    if isinstance(schema, StringSchema):
        issue = _bounds_issue(schema.min_length, schema.max_length, "minLength", "maxLength", path)
    elif isinstance(schema, NumberSchema):
        issue = _bounds_issue(schema.min, schema.max, "minimum", "maximum", path)
    elif isinstance(schema, ArraySchema):
        issue = _bounds_issue(schema.min_items, schema.max_items, "minItems", "maxItems", path)
    else:
        issue = None
    if issue is not None:
        issues.append(issue)

    if isinstance(schema, ObjectSchema):
        if not schema.additional_properties:
            for name in schema.required:
                if name not in schema.properties:
                    issues.append(
                        SchemaIssue(
                            message=f"Required property '{name}' is not declared on a strict object; "
                            f"it can never be present without being rejected",
                            schema_path=to_json_pointer(Key(p) for p in path + ["required"]),
                        )
                    )
        for name, child in schema.properties.items():
            _lint(child, path + ["properties", name], issues)
    elif isinstance(schema, ArraySchema) and schema.items is not None:
        _lint(schema.items, path + ["items"], issues)


__all__ = ["SchemaIssue", "lint_schema"]
