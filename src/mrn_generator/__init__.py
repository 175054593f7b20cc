"""
MRN Generator
=============

Generator for customs Movement Reference Numbers (MRNs) with a
self-validating check character.

Package Structure:
    mrn_generator/
    ├── core/           # Data model, field composer, checksum engine
    ├── generator.py    # Orchestration over a single random source
    ├── config.py       # Settings with environment overrides
    └── cli.py          # mrn-generator command

Quick Start:
    from mrn_generator import MRNGenerator, GenerationRequest

    generator = MRNGenerator()
    mrn = generator.generate(GenerationRequest(country_code="DK"))
    print(mrn.value)

    # Checksum only
    from mrn_generator.core import check_character
    check_character("24DK0047001234500")

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "MRN Generator Team"

from .core import (
    MRNConstants,
    MRN_LENGTH,
    MRN_PAYLOAD_LENGTH,
    MRN_ALPHABET,
    MRNError,
    InvalidFieldError,
    InvalidPayloadError,
    ConfigurationError,
    GenerationRequest,
    CompletedMrn,
    validate_request,
    compose,
    check_character,
    iso6346_check_character,
    complete,
)
from .generator import MRNGenerator

__all__ = [
    "__version__",
    "__author__",
    "MRNConstants",
    "MRN_LENGTH",
    "MRN_PAYLOAD_LENGTH",
    "MRN_ALPHABET",
    "MRNError",
    "InvalidFieldError",
    "InvalidPayloadError",
    "ConfigurationError",
    "GenerationRequest",
    "CompletedMrn",
    "validate_request",
    "compose",
    "check_character",
    "iso6346_check_character",
    "complete",
    "MRNGenerator",
]
