"""
Valid-input vectors with expected outputs.

Expected outputs are computed with the backend group law; pairing vectors
are built from bilinearity so their truth value is known by construction.
"""

from __future__ import annotations

import logging

from ecvectors.arith.backend import PairingBackend
from ecvectors.vectors.codec import ByteCodec
from ecvectors.vectors.types import VectorSuccess

logger = logging.getLogger(__name__)


class PositiveVectorGenerator:
    def __init__(self, codec: ByteCodec, backend: PairingBackend, rng, num_tests: int) -> None:
        self.codec = codec
        self.backend = backend
        self.rng = rng
        self.num_tests = num_tests

    def generate(self, operation: str) -> list[VectorSuccess]:
        if operation == "pairing":
            return self.pairing()
        group, _, kind = operation.partition("_")
        if kind == "add":
            return self.add(group)
        if kind == "mul":
            return self.mul(group)
        if kind == "multiexp":
            return self.multiexp(group)
        raise KeyError(f"Unknown operation: {operation}")

    # -- point addition ------------------------------------------------------

    def add(self, group: str) -> list[VectorSuccess]:
        g = self.backend.group(group)
        encode = self.codec.encode_point
        vectors: list[VectorSuccess] = []

        for i in range(self.num_tests):
            a = g.random_element(self.rng)
            b = g.random_element(self.rng)
            vectors.append(VectorSuccess(
                input=encode(group, a) + encode(group, b),
                expected=encode(group, g.add(a, b)),
                name=f"{group}_add_{i + 1}",
            ))

        # identity and inverse
        a = g.random_element(self.rng)
        vectors.append(VectorSuccess(
            input=encode(group, a) + encode(group, None),
            expected=encode(group, a),
            name=f"{group}_add_infinity",
        ))
        vectors.append(VectorSuccess(
            input=encode(group, a) + encode(group, g.neg(a)),
            expected=encode(group, None),
            name=f"{group}_add_negation",
        ))
        return vectors

    # -- scalar multiplication ----------------------------------------------

    def mul(self, group: str) -> list[VectorSuccess]:
        g = self.backend.group(group)
        encode = self.codec.encode_point
        vectors: list[VectorSuccess] = []

        for i in range(self.num_tests):
            a = g.random_element(self.rng)
            e = self.backend.random_scalar(self.rng)
            vectors.append(VectorSuccess(
                input=encode(group, a) + self.codec.encode_scalar(e),
                expected=encode(group, g.multiply(a, e)),
                name=f"{group}_mul_{i + 1}",
            ))

        a = g.random_element(self.rng)
        vectors.append(VectorSuccess(
            input=encode(group, a) + self.codec.encode_scalar(0),
            expected=encode(group, None),
            name=f"{group}_mul_zero_scalar",
        ))
        return vectors

    # -- multi-scalar multiplication ------------------------------------------

    def multiexp(self, group: str) -> list[VectorSuccess]:
        g = self.backend.group(group)
        vectors: list[VectorSuccess] = []

        for k in range(1, self.num_tests + 1):
            input_bytes = bytearray()
            acc = None
            for _ in range(k):
                a = g.random_element(self.rng)
                e = self.backend.random_scalar(self.rng)
                input_bytes += self.codec.encode_point(group, a)
                input_bytes += self.codec.encode_scalar(e)
                acc = g.add(acc, g.multiply(a, e))
            vectors.append(VectorSuccess(
                input=bytes(input_bytes),
                expected=self.codec.encode_point(group, acc),
                name=f"{group}_multiexp_{k}",
            ))
            logger.debug("%s multiexp with %d pairs", group, k)
        return vectors

    # -- pairing check ---------------------------------------------------------

    def pairing(self) -> list[VectorSuccess]:
        """True vectors by construction, then independent (false) vectors.

        The false vectors hold with overwhelming probability only: random
        independent pairs multiply to the identity with negligible but
        nonzero probability.
        """
        g1, g2 = self.backend.g1, self.backend.g2
        r = self.backend.scalar_modulus
        codec = self.codec
        true_result = codec.true_sentinel()
        false_result = codec.false_sentinel()
        vectors: list[VectorSuccess] = []

        # e(O, Q) = e(P, O) = 1
        vectors.append(VectorSuccess(
            input=codec.encode_infinity_g1() + codec.encode_point_g2(g2.generator),
            expected=true_result,
            name="pairing_infinity_g1",
        ))
        vectors.append(VectorSuccess(
            input=codec.encode_point_g1(g1.generator) + codec.encode_infinity_g2(),
            expected=true_result,
            name="pairing_infinity_g2",
        ))

        # prod e(a_i g1, b_i g2) * e(-sum(a_i b_i) g1, g2) = 1
        for k in range(2, self.num_tests + 2):
            input_bytes = bytearray()
            acc = 0
            for _ in range(k - 1):
                a = self.backend.random_scalar(self.rng)
                b = self.backend.random_scalar(self.rng)
                input_bytes += codec.encode_point_g1(g1.multiply(g1.generator, a))
                input_bytes += codec.encode_point_g2(g2.multiply(g2.generator, b))
                acc = (acc + a * b) % r
            input_bytes += codec.encode_point_g1(g1.multiply(g1.generator, -acc % r))
            input_bytes += codec.encode_point_g2(g2.generator)
            vectors.append(VectorSuccess(
                input=bytes(input_bytes),
                expected=true_result,
                name=f"pairing_true_{k}",
            ))

        for k in range(1, self.num_tests + 1):
            input_bytes = bytearray()
            for _ in range(k):
                input_bytes += codec.encode_point_g1(g1.random_element(self.rng))
                input_bytes += codec.encode_point_g2(g2.random_element(self.rng))
            vectors.append(VectorSuccess(
                input=bytes(input_bytes),
                expected=false_result,
                name=f"pairing_false_{k}",
            ))
        return vectors
