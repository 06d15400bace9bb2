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

"""Rendering of validation errors for people and tools."""

from typing import Any, Dict, Iterable, List

from .models.errors import ValidationError

ROOT_LABEL = "(root)"


def format_error(error: ValidationError) -> str:
    """Render one error as ``<pointer>: <message> [<code>]``."""
    return f"{error.pointer or ROOT_LABEL}: {error.message} [{error.code.value}]"


def format_errors(errors: Iterable[ValidationError], indent: str = "  - ") -> str:
    return "\n".join(f"{indent}{format_error(e)}" for e in errors)


def errors_to_json(errors: Iterable[ValidationError]) -> List[Dict[str, Any]]:
    return [e.to_dict() for e in errors]


def _escape_data(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(text: str) -> str:
    return _escape_data(text).replace(":", "%3A").replace(",", "%2C")


def github_annotation(message: str, file: Any) -> str:
    """Render one ``::error`` workflow command.

    GitHub Actions reads a workflow command from a single line, so line breaks
    and ``%`` are percent-encoded in the message. The file property also
    encodes ``:`` and ``,``, which would otherwise end it early.
    """
    return f"::error file={_escape_property(str(file))}::{_escape_data(message)}"


def github_annotations(errors: Iterable[ValidationError], file: Any) -> List[str]:
    """One ``::error`` workflow command per error."""
    return [github_annotation(format_error(e), file) for e in errors]


__all__ = [
    "ROOT_LABEL",
    "errors_to_json",
    "format_error",
    "format_errors",
    "github_annotation",
    "github_annotations",
]
