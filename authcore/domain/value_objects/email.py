"""Email value object."""

import re
from dataclasses import dataclass

from authcore.domain.exceptions import InvalidEmailError


EMAIL_REGEX = re.compile(
    r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
)


@dataclass(frozen=True)
class Email:
    """
    Email value object.

    Trims and lowercases the address so that lookups are case-insensitive.
    Normalization is idempotent: wrapping an already-normalized address is a no-op.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower()

        if not normalized or not EMAIL_REGEX.match(normalized):
            raise InvalidEmailError(self.value)

        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email(value={self.value!r})"
