"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from threads.domain.value.common import RootValueObject


class Username(RootValueObject[str]):
    """Public username.

    Usernames are stored lowercase so lookups are case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        """Lowercase and validate length."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v
