"""Whitespace-separated token reading and number formatting for the model store."""

SPACE = " "
TAB = "\t"
PRECISION = 5


class StorageFormatError(ValueError):
    """Raised when stored data is missing or corrupted."""


def format_number(value: float) -> str:
    """Render a number with the store's precision (5 significant digits)."""
    return format(float(value), f".{PRECISION}g")


class TokenReader:
    """Reads whitespace-separated tokens from a text, one after another."""

    def __init__(self, text: str) -> None:
        self._tokens = text.split()
        self._position = 0

    @property
    def exhausted(self) -> bool:
        """True when no tokens are left."""
        return self._position >= len(self._tokens)

    def next_token(self, what: str) -> str:
        """Return the next token; ``what`` names it in the error message."""
        if self.exhausted:
            raise StorageFormatError(f"Invalid storage: {what} is missing or corrupted")
        token = self._tokens[self._position]
        self._position += 1
        return token

    def next_int(self, what: str) -> int:
        """Return the next token as an integer."""
        token = self.next_token(what)
        try:
            return int(token)
        except ValueError:
            raise StorageFormatError(
                f"Invalid storage: {what} is missing or corrupted"
            ) from None

    def next_float(self, what: str) -> float:
        """Return the next token as a float."""
        token = self.next_token(what)
        try:
            return float(token)
        except ValueError:
            raise StorageFormatError(
                f"Invalid storage: {what} is missing or corrupted"
            ) from None

    @staticmethod
    def _expect_name(name: str, actual: str) -> None:
        if actual != name:
            raise StorageFormatError(f"Invalid storage: {name} is missing")

    def read_header(self, name: str) -> None:
        """Consume a token that must equal ``name``."""
        self._expect_name(name, self.next_token(name))

    def read_named_int(self, name: str, positive: bool) -> int:
        """Consume ``name`` followed by an integer."""
        actual = self.next_token(name)
        result = self.next_int(name)
        self._expect_name(name, actual)
        if positive and result < 0:
            raise StorageFormatError(
                f"Invalid storage: {name} should be a positive value"
            )
        return result

    def read_named_double(self, name: str) -> float:
        """Consume ``name`` followed by a float."""
        actual = self.next_token(name)
        result = self.next_float(name)
        self._expect_name(name, actual)
        return result

    def read_named_string(self, name: str) -> str:
        """Consume ``name`` followed by a single-token string."""
        actual = self.next_token(name)
        result = self.next_token(name)
        self._expect_name(name, actual)
        return result