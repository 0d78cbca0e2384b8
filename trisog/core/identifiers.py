"""Identifiers — generation and shape checks for object ids and user ids.

Invariants:
    - new_object_id() returns 24 lowercase hex chars: 8 of seconds-since-epoch + 16 random
    - is_valid_object_id() accepts exactly what new_object_id() can produce
    - is_valid_user_id() mirrors the auth provider's uid alphabet and length
"""

import re
import secrets
import time

from trisog.core.domain_types import ObjectId

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-f]{24}")
_USER_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{28,256}")


def new_object_id() -> ObjectId:
    """Time-ordered 12-byte id rendered as hex."""
    return ObjectId(f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}")


def is_valid_object_id(value: object) -> bool:
    return isinstance(value, str) and bool(_OBJECT_ID_PATTERN.fullmatch(value))


def is_valid_user_id(value: object) -> bool:
    return isinstance(value, str) and bool(_USER_ID_PATTERN.fullmatch(value))
