"""Email value object."""

from dataclasses import dataclass
import re

# local@domain.tld, no whitespace; deliverability is not our concern
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """Email address value object.

    Stored exactly as supplied: no lower-casing or trimming is applied, so
    ``Email("A@x.io")`` and ``Email("a@x.io")`` are distinct identities.

    Examples:
        >>> Email("mario@example.com").domain
        'example.com'

    Raises:
        ValueError: If the address is empty, too long or malformed
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Email cannot be empty")

        if len(self.value) > MAX_EMAIL_LENGTH:
            raise ValueError(
                f"Email too long ({len(self.value)} chars). "
                f"Maximum {MAX_EMAIL_LENGTH} characters allowed"
            )

        if not _EMAIL_PATTERN.match(self.value):
            raise ValueError(f"Invalid email format: {self.value}")

    @property
    def domain(self) -> str:
        """Part after the last '@'."""
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
