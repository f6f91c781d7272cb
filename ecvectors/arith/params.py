"""
Curve parameters for BLS12-377 (EIP-2539) and BW6-761 (EIP-3026).

BLS12-377 is determined by its seed x. BW6-761 is built on top of it: its
scalar field is the BLS12-377 base field. Cofactors and subgroup
generators are the published ones and are validated when a backend is
built.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from py_ecc.fields.field_elements import FQ

from ecvectors.arith.backend import PairingBackend
from ecvectors.arith.curves import CurveGroup
from ecvectors.arith.fields import BinomialFQP
from ecvectors.arith.pairing import TatePairing

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# BLS12-377
# ---------------------------------------------------------------------------

BLS12_377_SEED = 0x8508C00000000001
BLS12_377_R = BLS12_377_SEED ** 4 - BLS12_377_SEED ** 2 + 1
BLS12_377_P = (BLS12_377_SEED - 1) ** 2 * BLS12_377_R // 3 + BLS12_377_SEED

# Fq2 = Fq[u] / (u^2 + 5), Fq12 = Fq[w] / (w^12 + 5) with u = w^6
BLS12_377_NON_RESIDUE = -5

BLS12_377_G1_COFACTOR = (BLS12_377_SEED - 1) ** 2 // 3
BLS12_377_G2_COFACTOR = int(
    "26ba558ae9562addd88d99a6f6a829fbb36b00e1dcc40c8c505634fae2e189d693e8c366"
    "76bd09a0f3622fba094800452217cc900000000000000000000001",
    16,
)

BLS12_377_G1_X = int(
    "008848defe740a67c8fc6225bf87ff5485951e2caa9d41bb188282c8bd37cb5cd5481512"
    "ffcd394eeab9b16eb21be9ef",
    16,
)
BLS12_377_G1_Y = int(
    "01914a69c5102eff1f674f5d30afeec4bd7fb348ca3e52d96d182ad44fb82305c2fe3d36"
    "34a9591afd82de55559c8ea6",
    16,
)
# (c0, c1) per coordinate
BLS12_377_G2_X = (
    int(
        "018480be71c785fec89630a2a3841d01c565f071203e50317ea501f557db6b9b71889f52"
        "bb53540274e3e48f7c005196",
        16,
    ),
    int(
        "00ea6040e700403170dc5a51b1b140d5532777ee6651cecbe7223ece0799c9de5cf89984"
        "bff76fe6b26bfefa6ea16afe",
        16,
    ),
)
BLS12_377_G2_Y = (
    int(
        "00690d665d446f7bd960736bcbb2efb4de03ed7274b49a58e458c282f832d204f2cf8888"
        "6d8c7c2ef094094409fd4ddf",
        16,
    ),
    int(
        "00f8169fd28355189e549da3151a70aa61ef11ac3d591bf12463b01acee304c24279b83f"
        "5e52270bd9a1cdd185eb8f93",
        16,
    ),
)


class BLS12377FQ(FQ):
    field_modulus = BLS12_377_P


class BLS12377FQ2(BinomialFQP):
    field_modulus = BLS12_377_P
    degree = 2
    non_residue = BLS12_377_NON_RESIDUE


class BLS12377FQ12(BinomialFQP):
    field_modulus = BLS12_377_P
    degree = 12
    non_residue = BLS12_377_NON_RESIDUE


def build_bls12_377() -> PairingBackend:
    r = BLS12_377_R

    # E: y^2 = x^3 + 1
    g1 = CurveGroup(
        "bls12_377.G1", BLS12377FQ, BLS12377FQ(1), r, BLS12_377_G1_COFACTOR,
        (BLS12377FQ(BLS12_377_G1_X), BLS12377FQ(BLS12_377_G1_Y)),
    )

    # D-type twist E': y^2 = x^3 + 1/u
    g2 = CurveGroup(
        "bls12_377.G2", BLS12377FQ2, BLS12377FQ2.gen().inv(), r, BLS12_377_G2_COFACTOR,
        (BLS12377FQ2(list(BLS12_377_G2_X)), BLS12377FQ2(list(BLS12_377_G2_Y))),
    )

    # (x', y') -> (x' w^2, y' w^3)
    w = BLS12377FQ12.gen()
    pairing = TatePairing(g1, g2, BLS12377FQ12, w ** 2, w ** 3)
    backend = PairingBackend("bls12_377", g1, g2, pairing)
    backend.validate()
    return backend


# ---------------------------------------------------------------------------
# BW6-761
# ---------------------------------------------------------------------------

BW6_761_P = int(
    "0122e824fb83ce0ad187c94004faff3eb926186a81d14688528275ef8087be41707ba638"
    "e584e91903cebaff25b423048689c8ed12f9fd9071dcd3dc73ebff2e98a116c25667a8f8"
    "160cf8aeeaf0a437e6913e6870000082f49d00000000008b",
    16,
)
BW6_761_R = BLS12_377_P

# Fq6 = Fq[w] / (w^6 + 4)
BW6_761_NON_RESIDUE = -4

BW6_761_G1_COFACTOR = int(
    "ad1972339049ce762c77d5ac34cb12efc856a0853c9db94cc61c554757551c0c832ba406"
    "1000003b3de580000000007c",
    16,
)
BW6_761_G2_COFACTOR = int(
    "ad1972339049ce762c77d5ac34cb12efc856a0853c9db94cc61c554757551c0c832ba406"
    "1000003b3de5800000000075",
    16,
)

BW6_761_G1_X = int(
    "01075b020ea190c8b277ce98a477beaee6a0cfb7551b27f0ee05c54b85f56fc779017ffa"
    "c15520ac11dbfcd294c2e746a17a54ce47729b905bd71fa0c9ea097103758f9a280ca27f"
    "6750dd0356133e82055928aca6af603f4088f3af66e5b43d",
    16,
)
BW6_761_G1_Y = int(
    "0058b84e0a6fc574e6fd637b45cc2a420f952589884c9ec61a7348d2a2e573a3265909f1"
    "af7e0dbac5b8fa1771b5b806cc685d31717a4c55be3fb90b6fc2cdd49f9df141b3053253"
    "b2b08119cad0fb93ad1cb2be0b20d2a1bafc8f2db4e95363",
    16,
)
BW6_761_G2_X = int(
    "0110133241d9b816c852a82e69d660f9d61053aac5a7115f4c06201013890f6d26b41c5d"
    "ab3da268734ec3f1f09feb58c5bbcae9ac70e7c7963317a300e1b6bace6948cb3cd208d7"
    "00e96efbc2ad54b06410cf4fe1bf995ba830c194cd025f1c",
    16,
)
BW6_761_G2_Y = int(
    "017c3357761369f8179eb10e4b6d2dc26b7cf9acec2181c81a78e2753ffe3160a1d86c80"
    "b95a59c94c97eb733293fef64f293dbd2c712b88906c170ffa823003ea96fcd504affc75"
    "8aa2d3a3c5a02a591ec0594f9eac689eb70a16728c73b61",
    16,
)


class BW6761FQ(FQ):
    field_modulus = BW6_761_P


class BW6761FQ6(BinomialFQP):
    field_modulus = BW6_761_P
    degree = 6
    non_residue = BW6_761_NON_RESIDUE


def build_bw6_761() -> PairingBackend:
    r = BW6_761_R

    # E: y^2 = x^3 - 1
    g1 = CurveGroup(
        "bw6_761.G1", BW6761FQ, BW6761FQ(-1), r, BW6_761_G1_COFACTOR,
        (BW6761FQ(BW6_761_G1_X), BW6761FQ(BW6_761_G1_Y)),
    )

    # M-type twist E': y^2 = x^3 + 4
    g2 = CurveGroup(
        "bw6_761.G2", BW6761FQ, BW6761FQ(4), r, BW6_761_G2_COFACTOR,
        (BW6761FQ(BW6_761_G2_X), BW6761FQ(BW6_761_G2_Y)),
    )

    # (x', y') -> (x' w^-2, y' w^-3)
    w_inv = BW6761FQ6.gen().inv()
    pairing = TatePairing(g1, g2, BW6761FQ6, w_inv ** 2, w_inv ** 3)
    backend = PairingBackend("bw6_761", g1, g2, pairing)
    backend.validate()
    return backend


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

BACKEND_BUILDERS = {
    "bls12_377": build_bls12_377,
    "bw6_761": build_bw6_761,
}


@lru_cache(maxsize=None)
def get_backend(name: str) -> PairingBackend:
    """Build (once) and return the backend for a curve."""
    builder = BACKEND_BUILDERS.get(name)
    if builder is None:
        raise KeyError(f"Unknown curve backend: {name}")
    logger.debug("Building %s curve parameters", name)
    return builder()
