"""Generator tests over the toy backend.

The toy curve is small enough to generate many vectors quickly, so these
cover layout and recomputation properties across lots of random cases.
"""

import random

import pytest

from ecvectors.vectors.codec import ByteCodec
from ecvectors.vectors.negative import NegativeVectorGenerator
from ecvectors.vectors.positive import PositiveVectorGenerator
from ecvectors.vectors.types import ERR_NOT_ON_CURVE
from tests.fixtures.decode import decode_point, decode_scalar, split_slots
from tests.fixtures.toy import TOY_P, TOY_PROFILE, ToyBackend


NUM_TESTS = 25


@pytest.fixture(scope="module")
def toy_backend():
    return ToyBackend()


@pytest.fixture
def toy_codec(toy_backend):
    return ByteCodec(TOY_PROFILE, toy_backend.field_modulus)


@pytest.fixture
def positive(toy_backend, toy_codec):
    return PositiveVectorGenerator(toy_codec, toy_backend, random.Random(30), NUM_TESTS)


@pytest.fixture
def negative(toy_backend, toy_codec):
    return NegativeVectorGenerator(toy_codec, toy_backend, random.Random(31))


class TestPaddingLayout:
    @pytest.mark.parametrize("operation", ["g1_add", "g1_mul", "g1_multiexp"])
    def test_point_words_are_padded(self, positive, operation):
        for v in positive.generate(operation):
            for word in split_slots(v.expected, TOY_PROFILE.word_size):
                assert word[:TOY_PROFILE.field_padding] == b"\x00\x00"
                assert int.from_bytes(word, "big") < TOY_P


class TestToyRecompute:
    def test_add(self, toy_backend, positive):
        g = toy_backend.g1
        for v in positive.generate("g1_add"):
            a = decode_point(toy_backend, TOY_PROFILE, "g1", v.input[:8])
            b = decode_point(toy_backend, TOY_PROFILE, "g1", v.input[8:])
            assert decode_point(toy_backend, TOY_PROFILE, "g1", v.expected) == g.add(a, b)

    def test_mul(self, toy_backend, positive):
        g = toy_backend.g1
        for v in positive.generate("g1_mul"):
            pt = decode_point(toy_backend, TOY_PROFILE, "g1", v.input[:8])
            e = decode_scalar(TOY_PROFILE, v.input[8:])
            assert decode_point(toy_backend, TOY_PROFILE, "g1", v.expected) == g.multiply(pt, e)

    def test_multiexp_lengths(self, positive):
        vectors = positive.generate("g2_multiexp")
        assert [len(v.input) for v in vectors] == [12 * k for k in range(1, NUM_TESTS + 1)]

    def test_random_elements_in_subgroup(self, toy_backend, positive):
        g = toy_backend.g1
        for v in positive.generate("g1_add"):
            pt = decode_point(toy_backend, TOY_PROFILE, "g1", v.input[:8])
            assert g.is_on_curve(pt)
            assert g.is_in_subgroup(pt)


class TestToyNegative:
    def test_length_boundaries(self, negative):
        lengths = [len(v.input) for v in negative.generate("g1_add")[:3]]
        assert lengths == [0, 15, 17]

    def test_off_curve_points(self, toy_backend, negative):
        g = toy_backend.g1
        for _ in range(20):
            assert not g.is_on_curve(negative.random_point_not_on_curve(g))

    def test_wrong_subgroup_points(self, toy_backend, negative):
        g = toy_backend.g1
        for _ in range(20):
            pt = negative.random_point_not_in_subgroup(g)
            assert g.is_on_curve(pt)
            assert not g.is_in_subgroup(pt)

    def test_mul_not_on_curve(self, toy_backend, negative):
        v = {x.name: x for x in negative.generate("g1_mul")}["point_not_on_curve"]
        assert v.expected_error == ERR_NOT_ON_CURVE
        assert not toy_backend.g1.is_on_curve(decode_point(toy_backend, TOY_PROFILE, "g1", v.input[:8]))

    def test_oversized_value(self, negative):
        v = {x.name: x for x in negative.generate("g1_add")}["large_field_element"]
        assert v.input[8:12] == (TOY_P + 4).to_bytes(4, "big")
        assert v.input[12:] == b"\x00" * 4
