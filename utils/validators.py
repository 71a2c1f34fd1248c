from typing import Any, Optional


class GenreValidator:
    """Validation for genre values, tendencies and library capacities.

    Values coming from scenario files are untrusted: JSON booleans are ints in
    Python, so they are rejected explicitly.
    """

    @staticmethod
    def is_non_negative_int(value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value >= 0

    @staticmethod
    def is_positive_int(value: Any) -> bool:
        return GenreValidator.is_non_negative_int(value) and value > 0

    @staticmethod
    def require_genre_value(name: str, value: Any) -> int:
        if not GenreValidator.is_non_negative_int(value):
            raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        return value

    @staticmethod
    def require_capacity(name: str, value: Any) -> int:
        if not GenreValidator.is_positive_int(value):
            raise ValueError(f"{name} must be a positive integer, got {value!r}")
        return value


class TextValidator:
    """Basic text validations for titles and patron names."""

    @staticmethod
    def _is_non_empty(text: Optional[str]) -> bool:
        if not isinstance(text, str):
            return False
        return bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator._is_non_empty(title)

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        # names must contain at least one letter
        if not TextValidator._is_non_empty(name):
            return False
        return any(c.isalpha() for c in name)
