"""BiometricKey value object."""

from dataclasses import dataclass
import secrets

# 32 random bytes -> 43 url-safe chars
BIOMETRIC_KEY_BYTES = 32


@dataclass(frozen=True)
class BiometricKey:
    """Biometric key value object.

    Opaque credential issued to a user at registration and accepted later as a
    standalone login credential. Uniqueness is enforced by the user directory;
    the generator only makes collisions negligible.

    Examples:
        >>> key = BiometricKey.generate()
        >>> len(key.value)
        43

    Raises:
        ValueError: If the key is empty or blank
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Biometric key cannot be empty")

    @staticmethod
    def generate() -> "BiometricKey":
        """Generate a fresh random key from the OS CSPRNG."""
        return BiometricKey(secrets.token_urlsafe(BIOMETRIC_KEY_BYTES))

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        # keys are credentials, keep them out of logs and tracebacks
        return "BiometricKey('***')"
