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

"""Custom exceptions for zod_core.

Validation problems found in *data* are never raised; they are returned as
``ValidationError`` records. The exceptions below cover misuse of the library
itself.
"""

from .models.errors import to_json_pointer
from .report import ROOT_LABEL, format_errors


class ZodCoreError(Exception):
    """Base exception for zod_core related errors."""
    pass


class SchemaDefinitionError(ZodCoreError):
    """Exception raised when a schema cannot be constructed."""
    pass


class SchemaLoadError(SchemaDefinitionError):
    """Exception raised when a schema or data document cannot be read."""
    pass


class MaxDepthExceededError(ZodCoreError):
    """Exception raised when a value is nested deeper than the traversal limit."""

    def __init__(self, max_depth: int, path=()):
        self.max_depth = max_depth
        self.path = tuple(path)
        location = to_json_pointer(self.path) or ROOT_LABEL
        super().__init__(f"Maximum validation depth {max_depth} exceeded at {location}")


class SchemaValidationError(ZodCoreError):
    """Exception raised by ``assert_valid`` when a value does not conform."""

    def __init__(self, errors):
        self.errors = tuple(errors)
        details = format_errors(self.errors)
        super().__init__(f"Validation failed with {len(self.errors)} error(s):\n{details}")
