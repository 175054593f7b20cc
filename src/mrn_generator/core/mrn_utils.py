"""
MRN Utilities - Constants, Errors and Data Model
================================================

Shared definitions for MRN generation across all modules.

MRN layout (18 characters, 0-indexed):

    [0:2]   year                2 digits
    [2:4]   country code        2 letters (ISO 3166-1 alpha-2)
    [4:10]  declaration office  6 digits (supplied or random)
    [10:15] reference           5 random alphanumerics
    [15:17] category slot       procedure category or 2 random alphanumerics
    [17]    check character

Author: MRN Generator Project
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, FrozenSet, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# ERRORS
# =============================================================================

class MRNError(Exception):
    """Base exception for MRN generation errors."""
    pass


class InvalidFieldError(MRNError):
    """Raised when a supplied request field violates its format."""

    def __init__(self, field_name: str, value, reason: str):
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name} '{value}': {reason}")


class InvalidPayloadError(MRNError):
    """Raised when the checksum engine receives a malformed payload."""
    pass


class ConfigurationError(MRNError):
    """Raised when the generator is misconfigured."""
    pass


# =============================================================================
# MRN CONSTANTS
# =============================================================================

class MRNConstants:
    """Immutable MRN format constants."""

    LENGTH: int = 18
    PAYLOAD_LENGTH: int = 17

    DIGITS: str = "0123456789"
    LETTERS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    # Index in this string is the character's numeric value (0-35)
    ALPHABET: str = DIGITS + LETTERS
    VALID_CHARS: FrozenSet[str] = frozenset(ALPHABET)

    # Field slices within the payload
    YEAR_SLICE: slice = slice(0, 2)
    COUNTRY_SLICE: slice = slice(2, 4)
    OFFICE_SLICE: slice = slice(4, 10)
    REFERENCE_SLICE: slice = slice(10, 15)
    CATEGORY_SLICE: slice = slice(15, 17)

    OFFICE_LENGTH: int = 6
    REFERENCE_LENGTH: int = 5
    CATEGORY_LENGTH: int = 2


MRN_LENGTH = MRNConstants.LENGTH
MRN_PAYLOAD_LENGTH = MRNConstants.PAYLOAD_LENGTH
MRN_ALPHABET = MRNConstants.ALPHABET
MRN_VALID_CHARS = MRNConstants.VALID_CHARS


# Pre-compiled field patterns (applied after upper-casing)
FIELD_PATTERNS: Dict[str, re.Pattern] = {
    'year': re.compile(r'^[0-9]{2}$'),
    'country_code': re.compile(r'^[A-Z]{2}$'),
    'declaration_office': re.compile(r'^[0-9]{6}$'),
    'procedure_category': re.compile(r'^[A-Z][0-9A-Z]$'),
    'combined_category': re.compile(r'^[A-Z]$'),
}

FIELD_RULES: Dict[str, str] = {
    'year': "must be exactly 2 digits",
    'country_code': "must be exactly 2 letters",
    'declaration_office': "must be exactly 6 digits",
    'procedure_category': "must be one letter followed by one letter or digit",
    'combined_category': "must be a single letter",
}


def current_year() -> str:
    """Two-digit year of the current local date."""
    return datetime.now().strftime('%y')


# =============================================================================
# DATA MODEL
# =============================================================================

@dataclass(frozen=True)
class GenerationRequest:
    """
    Input for a single MRN generation.

    Field values are taken as supplied; normalisation and format checks
    happen in ``validate_request`` so that a request can be built from raw
    CLI input.
    """
    country_code: str
    declaration_office: Optional[str] = None
    procedure_category: Optional[str] = None
    combined_category: Optional[str] = None
    year: str = field(default_factory=current_year)


@dataclass(frozen=True)
class CompletedMrn:
    """A 17-character payload plus its check character."""
    payload: str
    check_character: str

    @property
    def value(self) -> str:
        return self.payload + self.check_character

    @property
    def year(self) -> str:
        return self.payload[MRNConstants.YEAR_SLICE]

    @property
    def country_code(self) -> str:
        return self.payload[MRNConstants.COUNTRY_SLICE]

    @property
    def declaration_office(self) -> str:
        return self.payload[MRNConstants.OFFICE_SLICE]

    @property
    def reference(self) -> str:
        return self.payload[MRNConstants.REFERENCE_SLICE]

    @property
    def category(self) -> str:
        return self.payload[MRNConstants.CATEGORY_SLICE]

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> Dict[str, str]:
        return {
            'mrn': self.value,
            'year': self.year,
            'country_code': self.country_code,
            'declaration_office': self.declaration_office,
            'reference': self.reference,
            'category': self.category,
            'check_character': self.check_character,
        }
