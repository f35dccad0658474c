"""Exceptions for use in Tile Pairing"""

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


# ========== Base Application Exception ==========


class TilePairingException(Exception):
    """Base exception for all Tile Pairing errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every library error with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(TilePairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidFormatException(PairingException):
    """Raised when an unknown pairing format is requested."""

    pass


# ========== Schedule Exceptions ==========


class ScheduleException(TilePairingException):
    """Base exception for team schedule errors."""

    pass


class InsufficientTeamsException(ScheduleException):
    """Raised when fewer than two teams are available for a round-robin."""

    pass


class ScheduleExhaustedException(ScheduleException):
    """Raised when a round beyond the end of the schedule is requested."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(TilePairingException):
    """Base exception for validation errors."""

    pass


class RatingValidationException(ValidationException):
    """Raised when a rating value is invalid."""

    pass


class RosterParseException(ValidationException):
    """Raised when a pasted roster contains no usable players."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(TilePairingException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a tournament snapshot cannot be loaded."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(TilePairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
