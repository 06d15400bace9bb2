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

"""Tests for the validation engine: exhaustive collection, ordering and paths."""

from __future__ import annotations

import copy
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

import pytest

from zod_core import builder as z
from zod_core.config import validator_config
from zod_core.engine import ValidationResult, assert_valid, is_valid, validate
from zod_core.exceptions import MaxDepthExceededError, SchemaDefinitionError, SchemaValidationError
from zod_core.models.errors import ErrorCode, Index, Key


def _codes(result):
    return [e.code for e in result.errors]


def _person():
    return (
        z.object()
        .property("name", z.string().min_length(1).build())
        .property("age", z.number().min(0).build())
        .required("name")
        .build()
    )


# ------------------------------------------------------------------
# Primitive schemas
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "schema,value",
    [
        (z.string().build(), "hello"),
        (z.string().min_length(3).max_length(10).build(), "hello"),
        (z.number().build(), 42),
        (z.number().build(), 4.5),
        (z.number().min(0).max(1).build(), 1),
        (z.boolean().build(), True),
        (z.boolean().build(), False),
    ],
)
def test_matching_primitives_pass(schema, value):
    result = validate(schema, value)

    assert isinstance(result, ValidationResult)
    assert result.ok is True
    assert result.errors == ()
    assert bool(result) is True


@pytest.mark.parametrize(
    "schema,value,expected,received",
    [
        (z.number().build(), "not a number", "number", "string"),
        (z.string().build(), 123, "string", "number"),
        (z.boolean().build(), 1, "boolean", "number"),
        (z.number().build(), True, "number", "boolean"),
        (z.string().build(), None, "string", "null"),
        (z.object().build(), [], "object", "array"),
        (z.array().build(), {}, "array", "object"),
        (z.array().build(), "abc", "array", "string"),
        (z.string().build(), b"bytes", "string", "bytes"),
    ],
)
def test_type_mismatch_yields_single_invalid_type(schema, value, expected, received):
    result = validate(schema, value)

    assert result.ok is False
    [error] = result.errors
    assert error.code is ErrorCode.INVALID_TYPE
    assert error.path == ()
    assert error.expected == expected
    assert error.received == received
    assert error.message == f"Expected {expected}, received {received}"


def test_string_bounds():
    schema = z.string().min_length(3).max_length(5).build()

    [short] = validate(schema, "ab").errors
    assert short.code is ErrorCode.MIN_LENGTH
    assert short.expected == 3
    assert short.received == 2

    [long] = validate(schema, "abcdef").errors
    assert long.code is ErrorCode.MAX_LENGTH
    assert long.expected == 5
    assert long.received == 6

    assert validate(schema, "abc").ok
    assert validate(schema, "abcde").ok


def test_string_length_counts_utf8_bytes():
    # "é" is two bytes in UTF-8.
    [error] = validate(z.string().max_length(5).build(), "héllo").errors

    assert error.code is ErrorCode.MAX_LENGTH
    assert error.expected == 5
    assert error.received == 6
    assert error.message == "String must contain at most 5 byte(s)"
    assert validate(z.string().max_length(6).build(), "héllo").ok


def test_min_length_counts_utf8_bytes():
    schema = z.string().min_length(4).build()

    assert validate(schema, "\U0001F600").ok
    [error] = validate(schema, "abc").errors
    assert error.received == 3


def test_inverted_string_bounds_report_both_violations():
    schema = z.string().min_length(5).max_length(2).build()

    result = validate(schema, "abcd")

    assert _codes(result) == [ErrorCode.MIN_LENGTH, ErrorCode.MAX_LENGTH]


def test_number_bounds():
    schema = z.number().min(0).max(150).build()

    [low] = validate(schema, -1).errors
    assert low.code is ErrorCode.MIN
    assert low.expected == 0
    assert low.received == -1

    [high] = validate(schema, 200.5).errors
    assert high.code is ErrorCode.MAX
    assert high.received == 200.5
    assert "150" in high.message


# ------------------------------------------------------------------
# Objects
# ------------------------------------------------------------------


def test_missing_required_fields_are_all_reported():
    schema = z.object().required("name", "age").build()

    result = validate(schema, {})

    assert _codes(result) == [ErrorCode.REQUIRED, ErrorCode.REQUIRED]
    assert [e.path for e in result.errors] == [(Key("name"),), (Key("age"),)]


def test_required_order_follows_declaration():
    schema = z.object().required("age").required("name").build()

    result = validate(schema, {})

    assert [e.path for e in result.errors] == [(Key("age"),), (Key("name"),)]


def test_required_error_payload():
    result = validate(_person(), {"age": 25})

    [error] = result.errors
    assert error.code is ErrorCode.REQUIRED
    assert error.path == (Key("name"),)
    assert error.expected == "string"
    assert error.received == "undefined"
    assert "name" in error.message


def test_required_key_without_declared_property():
    schema = z.object().required("token").build()

    [error] = validate(schema, {"other": 1}).errors
    assert error.expected is None
    assert validate(schema, {"token": None}).ok


def test_property_type_mismatch_is_reported_at_property_path():
    result = validate(_person(), {"name": "John", "age": "not a number"})

    [error] = result.errors
    assert error.code is ErrorCode.INVALID_TYPE
    assert error.path == (Key("age"),)
    assert error.pointer == "/age"


def test_strict_object_rejects_unknown_keys():
    strict = z.object().strict().build()
    lenient = z.object().build()

    [error] = validate(strict, {"x": 1}).errors
    assert error.code is ErrorCode.ADDITIONAL_PROPERTY
    assert error.path == (Key("x"),)
    assert error.received == "number"

    assert validate(lenient, {"x": 1}).ok


def test_unknown_keys_are_not_validated_when_allowed():
    schema = z.object().property("a", z.string().build()).build()

    assert validate(schema, {"a": "ok", "b": {"deep": [1, None]}}).ok


def test_object_type_mismatch_does_not_expand_nested_checks():
    schema = z.object().required("a", "b", "c").property("a", z.string().build()).build()

    result = validate(schema, ["a", "b"])

    assert _codes(result) == [ErrorCode.INVALID_TYPE]


def test_mappings_other_than_dict_are_objects():
    schema = z.object().property("a", z.number().build()).required("a").strict().build()

    assert validate(schema, OrderedDict(a=1)).ok
    assert validate(schema, MappingProxyType({"a": 1})).ok


# ------------------------------------------------------------------
# Arrays
# ------------------------------------------------------------------


@pytest.mark.parametrize(
    "value,codes",
    [
        ([], [ErrorCode.MIN_ITEMS]),
        (["a"] * 6, [ErrorCode.MAX_ITEMS]),
        (["a", "b", "c"], []),
    ],
)
def test_array_bounds(value, codes):
    schema = z.array().items(z.string().build()).min_items(1).max_items(5).build()

    result = validate(schema, value)

    assert _codes(result) == codes
    assert all(e.path == () for e in result.errors)


def test_array_bound_payload():
    schema = z.array().max_items(2).build()

    [error] = validate(schema, [1, 2, 3]).errors
    assert error.expected == 2
    assert error.received == 3


def test_every_invalid_element_is_reported_in_index_order():
    schema = z.array().items(z.string().min_length(1).build()).build()

    result = validate(schema, ["hello", "", 3, ""])

    assert [(e.path, e.code) for e in result.errors] == [
        ((Index(1),), ErrorCode.MIN_LENGTH),
        ((Index(2),), ErrorCode.INVALID_TYPE),
        ((Index(3),), ErrorCode.MIN_LENGTH),
    ]


def test_array_without_items_accepts_anything():
    assert validate(z.array().build(), [1, "a", None, {"x": []}]).ok


def test_tuples_are_arrays():
    schema = z.array().items(z.number().build()).build()

    assert validate(schema, (1, 2.5)).ok


def test_nested_path_through_array_and_object():
    schema = z.array().items(z.object().required("email").build()).build()

    result = validate(schema, [{"email": "ok@x.com"}, {}])

    [error] = result.errors
    assert error.code is ErrorCode.REQUIRED
    assert error.path == (Index(1), Key("email"))
    assert error.pointer == "/1/email"


# ------------------------------------------------------------------
# Exhaustive collection and ordering
# ------------------------------------------------------------------


def test_all_violations_collected_in_traversal_order():
    schema = (
        z.object()
        .property("name", z.string().min_length(1).build())
        .property("age", z.number().min(0).build())
        .property("tags", z.array().items(z.string().max_length(3).build()).build())
        .required("name", "email")
        .strict()
        .build()
    )
    value = {"age": -1, "extra": True, "tags": ["ok", "toolong", 5], "name": ""}

    result = validate(schema, value)

    assert [(e.pointer, e.code) for e in result.errors] == [
        ("/email", ErrorCode.REQUIRED),
        ("/age", ErrorCode.MIN),
        ("/extra", ErrorCode.ADDITIONAL_PROPERTY),
        ("/tags/1", ErrorCode.MAX_LENGTH),
        ("/tags/2", ErrorCode.INVALID_TYPE),
        ("/name", ErrorCode.MIN_LENGTH),
    ]


def test_validation_is_repeatable():
    schema = z.array().items(_person()).min_items(3).build()
    value = [{"name": ""}, {"age": -3}]

    first = validate(schema, value)
    second = validate(schema, value)

    assert first == second
    assert len(first.errors) == 4


def test_successful_validation_is_repeatable():
    schema = z.array().items(_person()).build()
    value = [{"name": "Jane", "age": 30}]

    assert validate(schema, value).ok
    assert validate(schema, value).ok


def test_input_is_not_modified():
    value = {"name": "", "age": "x", "extra": [1, 2]}
    snapshot = copy.deepcopy(value)

    validate(_person(), value)

    assert value == snapshot


def test_shared_schema_across_threads():
    schema = z.array().items(_person()).build()
    value = [{"name": "ok"}, {}, {"name": 1}]
    expected = validate(schema, value)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: validate(schema, value), range(64)))

    assert all(r == expected for r in results)


# ------------------------------------------------------------------
# Depth limit and misuse
# ------------------------------------------------------------------


def _nested(levels):
    schema = z.array().build()
    value = []
    for _ in range(levels):
        schema = z.array().items(schema).build()
        value = [value]
    return schema, value


def test_depth_limit_allows_exact_depth():
    schema, value = _nested(10)

    assert validate(schema, value, max_depth=10).ok


def test_depth_limit_raises_dedicated_error():
    schema, value = _nested(10)

    with pytest.raises(MaxDepthExceededError) as exc_info:
        validate(schema, value, max_depth=3)

    assert exc_info.value.max_depth == 3
    assert exc_info.value.path == (Index(0),) * 4
    assert "/0/0/0/0" in str(exc_info.value)


def test_depth_limit_defaults_to_config(monkeypatch):
    schema, value = _nested(3)
    monkeypatch.setattr(validator_config, "max_depth", 2)

    with pytest.raises(MaxDepthExceededError):
        validate(schema, value)


def test_non_positive_depth_limit_rejected():
    with pytest.raises(ValueError):
        validate(z.string().build(), "x", max_depth=0)


def test_unbuilt_builder_is_rejected():
    with pytest.raises(SchemaDefinitionError, match="build"):
        validate(z.string(), "x")


# ------------------------------------------------------------------
# Convenience wrappers
# ------------------------------------------------------------------


def test_is_valid():
    assert is_valid(_person(), {"name": "John"}) is True
    assert is_valid(_person(), {"name": ""}) is False


def test_assert_valid_returns_value_unchanged():
    value = {"name": "John", "age": 25}

    assert assert_valid(_person(), value) is value


def test_assert_valid_raises_with_all_errors():
    with pytest.raises(SchemaValidationError) as exc_info:
        assert_valid(_person(), {"name": "", "age": -1})

    error = exc_info.value
    assert [e.code for e in error.errors] == [ErrorCode.MIN_LENGTH, ErrorCode.MIN]
    assert "2 error(s)" in str(error)
    assert "/name" in str(error)
