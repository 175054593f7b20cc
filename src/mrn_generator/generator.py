"""
MRN Generator - Orchestration
=============================

Runs the field composer and the checksum engine for each requested MRN.

A generator owns one numpy random ``Generator`` for its whole lifetime, so
all MRNs produced by one instance come from a single unbroken random
sequence. Seeding the instance makes the output reproducible.

Usage:
    from mrn_generator import MRNGenerator, GenerationRequest

    generator = MRNGenerator(seed=42)
    request = GenerationRequest(country_code="DK", procedure_category="B1")
    for mrn in generator.generate_many(request, 5):
        print(mrn)
"""

import logging
from typing import List, Optional

import numpy as np

from .core import (
    DEFAULT_CHECK_SCHEME,
    CompletedMrn,
    GenerationRequest,
    compose,
    get_check_scheme,
    validate_request,
)

logger = logging.getLogger(__name__)


class MRNGenerator:
    """
    Generates checksum-correct MRNs.

    Generated references are not guaranteed to be unique across calls.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        check_scheme: str = DEFAULT_CHECK_SCHEME,
    ):
        """
        Initialize generator.

        Args:
            rng: Random source to use; created from ``seed`` if None
            seed: Seed for a new random source (ignored when ``rng`` is given)
            check_scheme: Check-character scheme name ('mod37' or 'iso6346')

        Raises:
            ConfigurationError: If the check scheme is unknown
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.check_scheme = check_scheme
        self._check = get_check_scheme(check_scheme)

        logger.debug(f"Generator initialized with scheme={check_scheme}, seed={seed}")

    def generate(self, request: GenerationRequest) -> CompletedMrn:
        """Generate a single MRN for a request."""
        payload = compose(request, self.rng)
        mrn = CompletedMrn(payload=payload, check_character=self._check(payload))
        logger.debug(f"Generated MRN {mrn.value}")
        return mrn

    def generate_many(self, request: GenerationRequest, count: int) -> List[CompletedMrn]:
        """
        Generate ``count`` MRNs in order.

        The request is validated once before any generation, so a bad field
        fails the whole batch without producing output.

        Raises:
            InvalidFieldError: If the request is malformed
            ValueError: If count is not a positive integer
        """
        if not isinstance(count, int) or isinstance(count, bool) or count < 1:
            raise ValueError(f"count must be a positive integer, got {count!r}")

        request = validate_request(request)
        mrns = [self.generate(request) for _ in range(count)]

        logger.info(f"Generated {len(mrns)} MRN(s) for country {request.country_code}")
        return mrns
