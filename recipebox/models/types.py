"""Custom column types."""

import json

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class JSONList(TypeDecorator):
    """An ordered list of strings stored as JSON text.

    Serialization happens here and nowhere else: callers always read and
    write Python lists, and a NULL or blank column reads back as ``[]``.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return json.dumps(list(value or []))

    def process_result_value(self, value, dialect):
        if not value:
            return []
        return list(json.loads(value))
