"""
MRN Checksum Engine
===================

Derives the 18th character of an MRN from its 17-character payload.

Two schemes are available:

- ``mod37`` (default): the payload is read as a base-36 numeral
  (``0-9`` -> 0-9, ``A-Z`` -> 10-35) and reduced modulo 37. The remainder
  maps back onto the same alphabet; remainder 36 has no single-character
  form and resolves to the sentinel ``'0'``.
- ``iso6346``: ISO 6346 character values weighted by ``2**position``,
  summed, reduced modulo 11 and then modulo 10.

Usage:
    from mrn_generator.core import check_character, complete

    check_character("24DK0047001234500")   # 'S'
    complete("24DK0047001234500").value    # '24DK0047001234500S'
"""

from typing import Callable, Dict

from .mrn_utils import (
    MRN_ALPHABET,
    MRN_PAYLOAD_LENGTH,
    MRN_VALID_CHARS,
    CompletedMrn,
    ConfigurationError,
    InvalidPayloadError,
)

MOD37_MODULUS: int = 37
MOD37_RADIX: int = 36
# Remainder 36 is outside the 36-character alphabet
MOD37_SENTINEL: str = '0'


def character_value(char: str) -> int:
    """Numeric value of a payload character: '0'-'9' -> 0-9, 'A'-'Z' -> 10-35."""
    if len(char) != 1 or char not in MRN_VALID_CHARS:
        raise InvalidPayloadError(f"Invalid payload character {char!r}")
    return MRN_ALPHABET.index(char)


def _check_payload(payload: str) -> None:
    if not isinstance(payload, str) or len(payload) != MRN_PAYLOAD_LENGTH:
        raise InvalidPayloadError(
            f"Payload must be {MRN_PAYLOAD_LENGTH} characters, got {payload!r}"
        )
    for i, char in enumerate(payload):
        if char not in MRN_VALID_CHARS:
            raise InvalidPayloadError(
                f"Invalid character {char!r} at position {i + 1} of payload {payload!r}"
            )


def check_character(payload: str) -> str:
    """
    Calculate the MOD 37 check character for an MRN payload.

    The remainder is accumulated left to right as
    ``r = (r * 36 + value) % 37``, which equals the full base-36 numeral
    modulo 37.

    Args:
        payload: 17-character string over ``0-9A-Z``

    Returns:
        Single check character (``0-9``, ``A-Z``)

    Raises:
        InvalidPayloadError: If the payload has the wrong length or contains
            characters outside ``0-9A-Z``
    """
    _check_payload(payload)

    remainder = 0
    for char in payload:
        remainder = (remainder * MOD37_RADIX + character_value(char)) % MOD37_MODULUS

    if remainder == MOD37_RADIX:
        return MOD37_SENTINEL
    return MRN_ALPHABET[remainder]


# =============================================================================
# ISO 6346 SCHEME
# =============================================================================

def iso6346_character_value(char: str) -> int:
    """
    Character value per the ISO 6346 tables.

    Letters start at 10 and skip multiples of 11:
    A=10, B-K=12..21, L-U=23..32, V-Z=34..38.
    """
    if len(char) != 1 or char not in MRN_VALID_CHARS:
        raise InvalidPayloadError(f"Invalid payload character {char!r}")
    if char.isdigit():
        return int(char)
    if char == 'A':
        return 10
    if 'B' <= char <= 'K':
        return ord(char) - 54
    if 'L' <= char <= 'U':
        return ord(char) - 53
    return ord(char) - 52


def iso6346_check_character(payload: str) -> str:
    """
    Calculate the ISO 6346 (MOD 11, then MOD 10) check digit.

    Args:
        payload: 17-character string over ``0-9A-Z``

    Returns:
        Single check digit ``'0'``-``'9'``
    """
    _check_payload(payload)

    total = sum(iso6346_character_value(char) * (2 ** i) for i, char in enumerate(payload))
    return str(total % 11 % 10)


# =============================================================================
# SCHEME REGISTRY
# =============================================================================

CHECK_SCHEMES: Dict[str, Callable[[str], str]] = {
    'mod37': check_character,
    'iso6346': iso6346_check_character,
}

DEFAULT_CHECK_SCHEME = 'mod37'


def get_check_scheme(name: str) -> Callable[[str], str]:
    """Look up a check-character function by scheme name."""
    try:
        return CHECK_SCHEMES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown check scheme: '{name}'. Valid schemes: {sorted(CHECK_SCHEMES)}"
        ) from None


def complete(payload: str, scheme: str = DEFAULT_CHECK_SCHEME) -> CompletedMrn:
    """Append the check character to a payload."""
    return CompletedMrn(payload=payload, check_character=get_check_scheme(scheme)(payload))
