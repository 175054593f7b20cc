"""
Test Suite for MRNGenerator
===========================

End-to-end generation: composer + checksum over a shared random source.

Run with: pytest tests/test_generator.py -v
"""

import re

import pytest
import numpy as np
import sys
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mrn_generator import (
    ConfigurationError,
    GenerationRequest,
    InvalidFieldError,
    MRNGenerator,
    check_character,
    iso6346_check_character,
)

DK_PATTERN = re.compile(r"^24DK[0-9A-Z]{11}[0-9A-Z]{2}[0-9A-Z]$")


@pytest.fixture
def generator():
    return MRNGenerator(seed=42)


class TestGenerate:
    """Tests for single MRN generation."""

    def test_end_to_end_dk(self, generator):
        mrn = generator.generate(GenerationRequest(country_code="DK", year="24"))
        assert DK_PATTERN.match(mrn.value)
        assert check_character(mrn.value[:17]) == mrn.value[17]

    def test_check_character_recomputes(self, generator):
        request = GenerationRequest(country_code="DE", procedure_category="B1", year="24")
        for mrn in generator.generate_many(request, 100):
            assert len(mrn.value) == 18
            assert check_character(mrn.payload) == mrn.check_character

    def test_declaration_office_in_output(self, generator):
        request = GenerationRequest(country_code="DK", declaration_office="004700", year="24")
        mrn = generator.generate(request)
        assert mrn.value[4:10] == "004700"
        assert mrn.declaration_office == "004700"

    def test_combined_category_in_output(self, generator):
        request = GenerationRequest(
            country_code="DK", procedure_category="B1", combined_category="A", year="24"
        )
        assert generator.generate(request).category == "BA"

    def test_iso6346_scheme(self):
        generator = MRNGenerator(seed=1, check_scheme='iso6346')
        mrn = generator.generate(GenerationRequest(country_code="DK", year="24"))
        assert mrn.check_character.isdigit()
        assert iso6346_check_character(mrn.payload) == mrn.check_character

    def test_unknown_scheme(self):
        with pytest.raises(ConfigurationError):
            MRNGenerator(check_scheme='mod97')

    def test_invalid_field_propagates(self, generator):
        with pytest.raises(InvalidFieldError):
            generator.generate(GenerationRequest(country_code="DENMARK", year="24"))


class TestGenerateMany:
    """Tests for batch generation."""

    def test_count(self, generator):
        mrns = generator.generate_many(GenerationRequest(country_code="DK", year="24"), 20)
        assert len(mrns) == 20
        assert all(DK_PATTERN.match(mrn.value) for mrn in mrns)

    @pytest.mark.parametrize("count", [0, -1, 2.5, True])
    def test_invalid_count(self, generator, count):
        with pytest.raises(ValueError):
            generator.generate_many(GenerationRequest(country_code="DK", year="24"), count)

    def test_invalid_request_produces_nothing(self, generator):
        state_before = generator.rng.bit_generator.state
        with pytest.raises(InvalidFieldError):
            generator.generate_many(GenerationRequest(country_code="D", year="24"), 5)
        assert generator.rng.bit_generator.state == state_before

    def test_reproducible_with_seed(self):
        request = GenerationRequest(country_code="DK", year="24")
        first = [m.value for m in MRNGenerator(seed=7).generate_many(request, 10)]
        second = [m.value for m in MRNGenerator(seed=7).generate_many(request, 10)]
        assert first == second

    def test_single_unbroken_sequence(self):
        """A batch continues one random stream rather than reseeding per MRN."""
        request = GenerationRequest(country_code="DK", year="24")

        batch = [m.value for m in MRNGenerator(seed=7).generate_many(request, 3)]

        one_by_one = MRNGenerator(seed=7)
        sequential = [one_by_one.generate(request).value for _ in range(3)]

        assert batch == sequential
        assert len(set(batch)) > 1

    def test_injected_rng(self):
        request = GenerationRequest(country_code="DK", year="24")
        injected = MRNGenerator(rng=np.random.default_rng(5)).generate(request)
        seeded = MRNGenerator(seed=5).generate(request)
        assert injected == seeded
