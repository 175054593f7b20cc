"""
MRN Generator Core Module
=========================

Field composition, checksum calculation and the shared MRN data model.
"""

from .mrn_utils import (
    # Constants
    MRNConstants,
    MRN_LENGTH,
    MRN_PAYLOAD_LENGTH,
    MRN_ALPHABET,
    MRN_VALID_CHARS,
    # Errors
    MRNError,
    InvalidFieldError,
    InvalidPayloadError,
    ConfigurationError,
    # Data model
    GenerationRequest,
    CompletedMrn,
    current_year,
)
from .composer import (
    validate_request,
    category_segment,
    random_characters,
    compose,
)
from .checksum import (
    CHECK_SCHEMES,
    DEFAULT_CHECK_SCHEME,
    character_value,
    check_character,
    iso6346_character_value,
    iso6346_check_character,
    get_check_scheme,
    complete,
)

__all__ = [
    # Constants
    "MRNConstants",
    "MRN_LENGTH",
    "MRN_PAYLOAD_LENGTH",
    "MRN_ALPHABET",
    "MRN_VALID_CHARS",
    # Errors
    "MRNError",
    "InvalidFieldError",
    "InvalidPayloadError",
    "ConfigurationError",
    # Data model
    "GenerationRequest",
    "CompletedMrn",
    "current_year",
    # Composer
    "validate_request",
    "category_segment",
    "random_characters",
    "compose",
    # Checksum
    "CHECK_SCHEMES",
    "DEFAULT_CHECK_SCHEME",
    "character_value",
    "check_character",
    "iso6346_character_value",
    "iso6346_check_character",
    "get_check_scheme",
    "complete",
]
