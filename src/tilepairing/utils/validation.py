"""Validation utilities for Tile Pairing.

This module provides reusable validation functions with consistent error handling.
"""

# Tile Pairing
# Copyright (C) 2025  Tile Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Any, Optional

from tilepairing.constants import MAX_RATING, MIN_RATING
from tilepairing.exceptions import RatingValidationException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Optional[str] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Rating Validation ==========


def validate_rating(
    rating: Any, min_rating: int = MIN_RATING, max_rating: int = MAX_RATING
) -> ValidationResult:
    """Validate a player rating.

    Accepts ints, integral floats and integer strings. Fractional values
    such as "1500.5" or 1500.7 are rejected.

    Args:
        rating: Rating value to validate
        min_rating: Minimum allowed rating
        max_rating: Maximum allowed rating

    Returns:
        ValidationResult with validation status
    """
    if rating is None or (isinstance(rating, str) and not rating.strip()):
        return ValidationResult(is_valid=False, error_message="Missing rating")

    if isinstance(rating, bool) or (
        isinstance(rating, float) and not rating.is_integer()
    ):
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid rating ({min_rating}-{max_rating})",
        )

    try:
        rating_int = int(rating.strip() if isinstance(rating, str) else rating)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid rating ({min_rating}-{max_rating})",
        )

    if rating_int < min_rating or rating_int > max_rating:
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid rating ({min_rating}-{max_rating})",
        )

    return ValidationResult(is_valid=True, sanitized_value=str(rating_int))


def validate_rating_strict(
    rating: Any, min_rating: int = MIN_RATING, max_rating: int = MAX_RATING
) -> int:
    """Validate rating and return integer or raise exception.

    Raises:
        RatingValidationException: If rating is invalid
    """
    result = validate_rating(rating, min_rating, max_rating)
    if not result.is_valid:
        raise RatingValidationException(f"{result.error_message}: {rating!r}")
    return int(result.sanitized_value or "0")


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a player or team name.

    Names are free text; only emptiness is rejected.
    """
    if not name or not name.strip():
        return ValidationResult(is_valid=False, error_message="Missing name")
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


# ========== Generic Validation ==========


def validate_positive_integer(
    value: Optional[int], field_name: str = "Value"
) -> ValidationResult:
    """Validate that a value is a positive integer.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if value is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )

    if isinstance(value, bool) or (
        isinstance(value, float) and not value.is_integer()
    ):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a whole number",
        )

    try:
        int_value = int(value)
        if int_value <= 0:
            return ValidationResult(
                is_valid=False,
                error_message=f"{field_name} must be positive",
            )
        return ValidationResult(is_valid=True, sanitized_value=str(int_value))
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number",
        )


def validate_fraction(value: Any, field_name: str = "Fraction") -> ValidationResult:
    """Validate a share of the field, which must lie in (0, 1]."""
    try:
        if isinstance(value, bool):
            raise TypeError(value)
        float_value = float(value)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number: {value!r}",
        )
    if not 0.0 < float_value <= 1.0:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be in (0, 1]: {float_value}",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(float_value))


def validate_flag(value: Any, field_name: str = "Flag") -> ValidationResult:
    """Validate an on/off setting. Only real booleans are accepted, so the
    string "false" is not mistaken for a true value."""
    if not isinstance(value, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be true or false: {value!r}",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value))
