"""Document-style object ids.

Every stored row is keyed by a 24-character hex string shaped like a
document-store object id: a 4-byte big-endian timestamp followed by
8 random bytes. Only strings of that shape count as references that
may be written into another row.
"""

import re
import secrets
import time

REFERENCE_LENGTH = 24

_REFERENCE_RE = re.compile(r"^[0-9a-fA-F]{24}$")


def new_object_id() -> str:
    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


def is_reference(value: object) -> bool:
    """True when value is a well-formed 24-character reference string."""
    return isinstance(value, str) and bool(_REFERENCE_RE.match(value))
