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

"""Shared fixtures for the zod_core test-suite."""

from __future__ import annotations

import logging

import pytest

from zod_core.config import validator_config
from zod_core.models.schema_loader import clear_cache


@pytest.fixture(autouse=True)
def _isolated_state():
    """Reset the schema cache, global config and package logger around each test."""
    clear_cache()
    saved = (
        validator_config.max_depth,
        validator_config.log_level,
        validator_config.print_level,
        validator_config.cache_enabled,
    )
    yield
    (
        validator_config.max_depth,
        validator_config.log_level,
        validator_config.print_level,
        validator_config.cache_enabled,
    ) = saved
    clear_cache()
    package_logger = logging.getLogger("zod_core")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
