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

"""Runtime configuration for zod_core."""

import logging
import os
from dataclasses import dataclass

from .utils.logging_utils import DEFAULT_FORMAT, configure_split_stream_logging

logger = logging.getLogger(__name__)

ENV_PREFIX = "ZOD_CORE_"
DEFAULT_MAX_DEPTH = 256


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {ENV_PREFIX}{name}={raw!r}: not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"Ignoring {ENV_PREFIX}{name}={raw!r}: must be positive, using {default}")
        return default
    return value


@dataclass
class ValidatorConfig:
    """Configuration for validation and schema loading."""
    max_depth: int = DEFAULT_MAX_DEPTH
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            max_depth=_env_int('MAX_DEPTH', DEFAULT_MAX_DEPTH),
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'INFO'),
            print_level=os.getenv(ENV_PREFIX + 'PRINT_LEVEL', 'ERROR'),
            cache_enabled=os.getenv(ENV_PREFIX + 'CACHE_ENABLED', 'true').lower() == 'true',
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        formatter = logging.Formatter(DEFAULT_FORMAT)
        return configure_split_stream_logging(
            level=self.log_level,
            stderr_level=self.print_level,
            formatter=formatter,
        )


# Global configuration instance
validator_config = ValidatorConfig.from_env()
