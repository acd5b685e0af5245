"""Anonymous owner identifiers."""

import re
import uuid

USER_ID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_user_id(value: object) -> bool:
    """Return true when the value is a UUID v4 string."""
    return isinstance(value, str) and USER_ID_PATTERN.match(value) is not None


def generate_user_id() -> str:
    """Generate a new random UUID v4 identifier."""
    return str(uuid.uuid4())
