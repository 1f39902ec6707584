import json
import logging
from typing import Any, Iterable
from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

log = logging.getLogger(__name__)

def encode_list(values: Iterable[Any] | None) -> str:
    return json.dumps(list(values) if values is not None else [])

def decode_list(raw: str | None, item_type: type = str) -> list:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError:
        log.warning("Discarding malformed list value (%d chars)", len(raw))
        return []
    if not isinstance(value, list):
        return []
    if not all(isinstance(item, item_type) for item in value):
        log.warning("Discarding list value with non-%s elements", item_type.__name__)
        return []
    return value

class JsonList(TypeDecorator):
    """List column persisted as JSON text; unreadable values come back as [].

    Elements that are not ``item_type`` make the whole value unreadable.
    Pass ``object`` to leave elements to the caller.
    """

    impl = Text
    cache_ok = True

    def __init__(self, item_type: type = str):
        super().__init__()
        self.item_type = item_type

    def process_bind_param(self, value, dialect):
        return encode_list(value)

    def process_result_value(self, value, dialect):
        return decode_list(value, self.item_type)

    def coerce_compared_value(self, op, value):
        # LIKE/== against the raw text, not another encoded list
        return Text()
