"""Schema and error data model.

Schema documents (``schema_loader``) are imported separately because they pull
in the builders and the third-party document parsers.
"""

from .errors import (
    ErrorCode,
    Index,
    JsonPointer,
    Key,
    Path,
    PathSegment,
    ValidationError,
    to_json_pointer,
)
from .schema import (
    ArraySchema,
    BooleanSchema,
    NumberSchema,
    ObjectSchema,
    SchemaSpec,
    StringSchema,
    is_schema,
)
