"""Tests for signature derivation.

signature(speed, brightness) must equal ceil(speed * brightness / 10) for
every integer input, using true ceiling semantics.
"""

import dataclasses
import math

import numpy as np
import pytest

from sightingsearch.sightings.signature import signature, compute_signatures
from sightingsearch.sightings.collection import Sighting


class TestSignature:
    """Test scalar signature computation."""

    def test_documented_example(self):
        """ceil(21 / 10) == 3."""
        assert signature(3, 7) == 3

    def test_exact_multiple(self):
        """Multiples of 10 are not rounded up."""
        assert signature(10, 5) == 5
        assert signature(2, 5) == 1

    def test_rounds_up_not_truncates(self):
        """Any remainder rounds up."""
        assert signature(8, 8) == 7   # 64 / 10 = 6.4
        assert signature(1, 1) == 1   # 1 / 10 = 0.1
        assert signature(11, 1) == 2  # 11 / 10 = 1.1

    def test_zero(self):
        """Zero product gives zero signature."""
        assert signature(0, 123) == 0
        assert signature(123, 0) == 0

    def test_negative_product_rounds_toward_positive_infinity(self):
        """ceil(-2.1) == -2, ceil(-0.1) == 0."""
        assert signature(-3, 7) == -2
        assert signature(3, -7) == -2
        assert signature(-1, 1) == 0
        assert signature(-5, 2) == -1

    def test_both_negative(self):
        """Negative times negative is positive."""
        assert signature(-3, -7) == 3

    @pytest.mark.parametrize("speed,brightness", [
        (s, b) for s in range(-25, 26, 3) for b in range(-25, 26, 4)
    ])
    def test_matches_float_ceiling(self, speed, brightness):
        """Agrees with math.ceil on small inputs."""
        assert signature(speed, brightness) == math.ceil(speed * brightness / 10.0)

    def test_large_int32_inputs_do_not_overflow(self):
        """Product of two int32 extremes is computed in 64 bits."""
        big = 2 ** 31 - 1
        expected = -((-(big * big)) // 10)
        assert signature(big, big) == expected
        assert signature(big, big) > 0


class TestComputeSignatures:
    """Test vectorised signature computation."""

    def test_example_array(self):
        """Worked example gives [5, 3, 7]."""
        speed = np.array([10, 3, 8], dtype=np.int64)
        brightness = np.array([5, 7, 8], dtype=np.int64)

        signatures = compute_signatures(speed, brightness)

        np.testing.assert_array_equal(signatures, [5, 3, 7])
        assert signatures.dtype == np.int64

    def test_empty(self):
        """Empty input gives empty output."""
        empty = np.array([], dtype=np.int64)
        assert len(compute_signatures(empty, empty)) == 0

    def test_matches_scalar(self, random_data):
        """Element-wise identical to the scalar function."""
        speed, brightness, _ = random_data
        signatures = compute_signatures(speed, brightness)

        for i in range(len(speed)):
            assert signatures[i] == signature(speed[i], brightness[i])

    def test_returns_new_array(self):
        """Each call returns a fresh array (nothing cached)."""
        speed = np.array([1, 2], dtype=np.int64)
        brightness = np.array([10, 10], dtype=np.int64)

        first = compute_signatures(speed, brightness)
        first[0] = 999
        second = compute_signatures(speed, brightness)

        assert second[0] == 1


class TestSightingRecord:
    """Test the Sighting dataclass."""

    def test_signature_property(self):
        """Property matches the function."""
        assert Sighting(3, 7).signature == 3
        assert isinstance(Sighting(3, 7).signature, int)

    def test_str(self):
        """Rendered as '(speed, brightness) => signature'."""
        assert str(Sighting(8, 8)) == "(8, 8) => 7"

    def test_value_equality(self):
        """Equal fields mean equal sightings."""
        assert Sighting(1, 2) == Sighting(1, 2)
        assert Sighting(1, 2) != Sighting(2, 1)

    def test_immutable(self):
        """Fields cannot be reassigned."""
        s = Sighting(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            s.speed = 5
