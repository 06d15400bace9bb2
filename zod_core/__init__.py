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

"""Runtime schema validation with exhaustive, path-tagged error reporting."""

__version__ = "0.1.0"

from . import builder
from .engine import ValidationResult, assert_valid, is_valid, validate
from .exceptions import (
    MaxDepthExceededError,
    SchemaDefinitionError,
    SchemaLoadError,
    SchemaValidationError,
    ZodCoreError,
)
from .linter import SchemaIssue, lint_schema
from .models import (
    ArraySchema,
    BooleanSchema,
    ErrorCode,
    Index,
    Key,
    NumberSchema,
    ObjectSchema,
    PathSegment,
    SchemaSpec,
    StringSchema,
    ValidationError,
)
from .models.schema_loader import load_schema, schema_from_dict, schema_to_dict

__all__ = [
    "ArraySchema",
    "BooleanSchema",
    "ErrorCode",
    "Index",
    "Key",
    "MaxDepthExceededError",
    "NumberSchema",
    "ObjectSchema",
    "PathSegment",
    "SchemaDefinitionError",
    "SchemaIssue",
    "SchemaLoadError",
    "SchemaSpec",
    "SchemaValidationError",
    "StringSchema",
    "ValidationError",
    "ValidationResult",
    "ZodCoreError",
    "assert_valid",
    "builder",
    "is_valid",
    "lint_schema",
    "load_schema",
    "schema_from_dict",
    "schema_to_dict",
    "validate",
]
