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

"""Schema documents: load schemas from JSON/YAML, dump them back.

Documents use a small subset of JSON Schema::

    type: object
    required: [name]
    additionalProperties: false
    properties:
      name: {type: string, minLength: 1}
      tags:
        type: array
        items: {type: string}
        maxItems: 5

Every document is first checked against ``META_SCHEMA`` with ``jsonschema`` so
that all problems are reported at once, with their location in the document.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import jsonschema
import yaml

from .. import builder
from ..config import validator_config
from ..exceptions import SchemaDefinitionError, SchemaLoadError
from .errors import Key, to_json_pointer
from .schema import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaSpec,
    StringSchema,
)

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")

_COUNT = {"type": "integer", "minimum": 0}

TOO_DEEP = "nested too deeply"

META_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["type"],
    "properties": {
        "$schema": {"type": "string"},
        "title": {"type": "string"},
        "description": {"type": "string"},
        "type": {"enum": ["string", "number", "integer", "boolean", "object", "array"]},
        "minLength": _COUNT,
        "maxLength": _COUNT,
        "minimum": {"type": "number"},
        "maximum": {"type": "number"},
        "properties": {"type": "object", "additionalProperties": {"$ref": "#"}},
        "required": {"type": "array", "items": {"type": "string"}},
        "additionalProperties": {"type": "boolean"},
        "items": {"$ref": "#"},
        "minItems": _COUNT,
        "maxItems": _COUNT,
    },
    "additionalProperties": False,
}

_ANNOTATIONS = {"$schema", "title", "description", "type"}

_KEYWORDS_BY_TYPE = {
    "string": {"minLength", "maxLength"},
    "number": {"minimum", "maximum"},
    "integer": {"minimum", "maximum"},
    "boolean": set(),
    "object": {"properties", "required", "additionalProperties"},
    "array": {"items", "minItems", "maxItems"},
}

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[Path, SchemaSpec] = {}

_meta_validator = jsonschema.Draft7Validator(META_SCHEMA)


def _pointer(parts: Sequence[Any]) -> str:
    return to_json_pointer(Key(str(p)) for p in parts)


def check_schema_document(document: Any) -> List[str]:
    """Return every problem in ``document`` as ``"<pointer>: <message>"`` lines."""
    problems: List[str] = []
    try:
        errors = sorted(_meta_validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path])
    except RecursionError:
        return [f"(root): {TOO_DEEP}"]
    for error in errors:
        problems.append(f"{_pointer(error.absolute_path) or '(root)'}: {error.message}")
    if problems:
        return problems

    # Keywords that belong to a different type are silently meaningless in
    # JSON Schema; here they are rejected.
    def _walk(node: Dict[str, Any], path: List[Any]) -> None:
        allowed = _ANNOTATIONS | _KEYWORDS_BY_TYPE[node["type"]]
        for keyword in node:
            if keyword not in allowed:
                problems.append(
                    f"{_pointer(path + [keyword])}: keyword '{keyword}' does not apply to type '{node['type']}'"
                )
        for name, child in node.get("properties", {}).items():
            _walk(child, path + ["properties", name])
        if "items" in node:
            _walk(node["items"], path + ["items"])

    try:
        _walk(document, [])
    except RecursionError:
        return [f"(root): {TOO_DEEP}"]
    return problems


def _build(node: Dict[str, Any]) -> SchemaSpec:
    kind = node["type"]
    if kind == "string":
        b = builder.string()
        if "minLength" in node:
            b.min_length(int(node["minLength"]))
        if "maxLength" in node:
            b.max_length(int(node["maxLength"]))
        return b.build()
    if kind in ("number", "integer"):
        b = builder.number()
        if "minimum" in node:
            b.min(node["minimum"])
        if "maximum" in node:
            b.max(node["maximum"])
        return b.build()
    if kind == "boolean":
        return builder.boolean().build()
    if kind == "object":
        b = builder.object()
        for name, child in node.get("properties", {}).items():
            b.property(name, _build(child))
        b.required(*node.get("required", ()))
        if node.get("additionalProperties") is False:
            b.strict()
        return b.build()
    b = builder.array()
    if "items" in node:
        b.items(_build(node["items"]))
    if "minItems" in node:
        b.min_items(int(node["minItems"]))
    if "maxItems" in node:
        b.max_items(int(node["maxItems"]))
    return b.build()


def schema_from_dict(document: Any) -> SchemaSpec:
    """Build a schema from a parsed schema document.

    Raises:
        SchemaDefinitionError: Listing every problem found in the document.
    """
    problems = check_schema_document(document)
    if problems:
        details = "\n".join(f"  - {p}" for p in problems)
        raise SchemaDefinitionError(f"Invalid schema document:\n{details}")
    try:
        return _build(document)
    except RecursionError as e:
        raise SchemaDefinitionError(f"Invalid schema document: {TOO_DEEP}") from e


def schema_to_dict(schema: SchemaSpec) -> Dict[str, Any]:
    """Render ``schema`` as a schema document accepted by ``schema_from_dict``."""
    doc: Dict[str, Any] = {"type": schema.type_name}
    if isinstance(schema, StringSchema):
        if schema.min_length is not None:
            doc["minLength"] = schema.min_length
        if schema.max_length is not None:
            doc["maxLength"] = schema.max_length
    elif isinstance(schema, NumberSchema):
        if schema.min is not None:
            doc["minimum"] = schema.min
        if schema.max is not None:
            doc["maximum"] = schema.max
    elif isinstance(schema, ObjectSchema):
        if schema.properties:
            doc["properties"] = {name: schema_to_dict(child) for name, child in schema.properties.items()}
        if schema.required:
            doc["required"] = list(schema.required)
        if not schema.additional_properties:
            doc["additionalProperties"] = False
    elif isinstance(schema, ArraySchema):
        if schema.items is not None:
            doc["items"] = schema_to_dict(schema.items)
        if schema.min_items is not None:
            doc["minItems"] = schema.min_items
        if schema.max_items is not None:
            doc["maxItems"] = schema.max_items
    elif not isinstance(schema, BooleanSchema):
        raise SchemaDefinitionError(f"Unknown schema spec: {type(schema).__name__}")
    return doc


def load_document(file_path: Union[str, Path]) -> Any:
    """Load a JSON or YAML document, chosen by file extension.

    Raises:
        SchemaLoadError: If the file is missing, unreadable, not parseable or
            has an unsupported extension.
    """
    path = Path(file_path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}")

    if not path.is_file():
        raise SchemaLoadError(f"Path is not a file: {path}")

    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise SchemaLoadError(
            f"Unsupported file extension '{path.suffix}' for {path}. "
            f"Expected one of: {', '.join(JSON_SUFFIXES + YAML_SUFFIXES)}"
        )

    logger.debug(f"Loading document: {path}")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"Cannot read {path}: {e}") from e

    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno}, column {e.colno})") from e
        except RecursionError as e:
            raise SchemaLoadError(f"Document {path} is {TOO_DEEP}") from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML in {path}: {e}") from e
    except RecursionError as e:
        raise SchemaLoadError(f"Document {path} is {TOO_DEEP}") from e


def load_schema(file_path: Union[str, Path]) -> SchemaSpec:
    """Load and build a schema from a JSON or YAML schema document.

    Results are cached per resolved path while ``validator_config.cache_enabled``
    is set.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaDefinitionError: If the document is not a valid schema.
    """
    path = Path(file_path).resolve()

    if validator_config.cache_enabled and path in _SCHEMA_CACHE:
        logger.debug(f"Loading schema from cache: {path}")
        return _SCHEMA_CACHE[path]

    document = load_document(path)
    try:
        schema = schema_from_dict(document)
    except SchemaDefinitionError as e:
        raise SchemaDefinitionError(f"{path}: {e}") from e

    if validator_config.cache_enabled:
        _SCHEMA_CACHE[path] = schema
    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
