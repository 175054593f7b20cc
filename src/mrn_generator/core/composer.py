"""
MRN Field Composer
==================

Builds the 17-character unchecked MRN payload from a ``GenerationRequest``.

Validation is done up front by ``validate_request``; no random value is drawn
for a request that fails it. The random source is a numpy ``Generator``
passed in by the caller so tests can pin it with a seed.
"""

import dataclasses
import logging
from typing import Optional

import numpy as np

from .mrn_utils import (
    FIELD_PATTERNS,
    FIELD_RULES,
    MRN_ALPHABET,
    MRN_PAYLOAD_LENGTH,
    MRNConstants,
    GenerationRequest,
    InvalidFieldError,
)

logger = logging.getLogger(__name__)


def _normalize(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    value = value.strip()
    # Unicode case mapping can turn one character into several ('ﬀ' -> 'FF')
    if not value.isascii():
        return value
    return value.upper()


def _check_field(name: str, value) -> None:
    if not isinstance(value, str) or not FIELD_PATTERNS[name].match(value):
        raise InvalidFieldError(name, value, FIELD_RULES[name])


def validate_request(request: GenerationRequest) -> GenerationRequest:
    """
    Normalise and validate every field of a request.

    Text fields are stripped and upper-cased, then matched against their
    format. A combined category is only accepted together with a procedure
    category.

    Args:
        request: Raw generation request

    Returns:
        A new request holding the normalised values

    Raises:
        InvalidFieldError: On the first field that violates its format
    """
    normalized = dataclasses.replace(
        request,
        country_code=_normalize(request.country_code),
        declaration_office=_normalize(request.declaration_office),
        procedure_category=_normalize(request.procedure_category),
        combined_category=_normalize(request.combined_category),
        year=_normalize(request.year),
    )

    _check_field('year', normalized.year)
    _check_field('country_code', normalized.country_code)

    for name in ('declaration_office', 'procedure_category', 'combined_category'):
        value = getattr(normalized, name)
        if value is not None:
            _check_field(name, value)

    if normalized.combined_category is not None and normalized.procedure_category is None:
        raise InvalidFieldError(
            'combined_category',
            normalized.combined_category,
            "requires a procedure category",
        )

    return normalized


def random_characters(rng: np.random.Generator, alphabet: str, count: int) -> str:
    """Draw ``count`` characters uniformly from ``alphabet``."""
    indices = rng.integers(0, len(alphabet), size=count)
    return ''.join(alphabet[i] for i in indices)


def category_segment(procedure_category: str, combined_category: Optional[str] = None) -> str:
    """
    Two-character category slot for a procedure category.

    A combined category replaces the second character:
    ``category_segment("B1", "A") == "BA"``.
    """
    if combined_category is None:
        return procedure_category
    return procedure_category[0] + combined_category


def compose(request: GenerationRequest, rng: np.random.Generator) -> str:
    """
    Compose the 17-character payload for a request.

    Args:
        request: Generation request (validated here)
        rng: Random source for the office, reference and category filler

    Returns:
        Payload string over ``0-9A-Z``

    Raises:
        InvalidFieldError: If any field is malformed
    """
    request = validate_request(request)

    if request.declaration_office is not None:
        office = request.declaration_office
    else:
        office = random_characters(rng, MRNConstants.DIGITS, MRNConstants.OFFICE_LENGTH)

    reference = random_characters(rng, MRN_ALPHABET, MRNConstants.REFERENCE_LENGTH)

    if request.procedure_category is not None:
        category = category_segment(request.procedure_category, request.combined_category)
    else:
        category = random_characters(rng, MRN_ALPHABET, MRNConstants.CATEGORY_LENGTH)

    payload = f"{request.year}{request.country_code}{office}{reference}{category}"
    assert len(payload) == MRN_PAYLOAD_LENGTH, f"composed payload {payload!r} has wrong length"

    logger.debug(f"Composed payload {payload}")
    return payload
