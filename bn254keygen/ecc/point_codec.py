#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Fixed-width uncompressed point representation.

The layout is the one of the key record (pub_hex, pub_g2_hex):

* G1: 32 bytes big-endian x || 32 bytes big-endian y (64 bytes)
* G2: x.c0 || x.c1 || y.c0 || y.c1, each limb 32 bytes
  big-endian (128 bytes)

The identity is encoded as all zero bytes:
(0, 0) is not on the curve, so there is no ambiguity.

G2 limbs are written c0 first by default.
Contract call arguments (the EIP-197 precompile input,
Solidity BN254.G2Point arrays, KeyRegistrar abi.encode key data)
use the c1-first order instead, available as LimbOrder.C1_FIRST.
"""

from typing import Tuple

from bn254keygen.alias import IntPoint, IntPoint2, Octets
from bn254keygen.ecc.curve_group import G1Point, G2Point
from bn254keygen.ecc.field import FieldElement, Fp2Element, LimbOrder
from bn254keygen.exceptions import BN254TypeError, PointNotOnCurve
from bn254keygen.utils import bytes_from_octets

G1_SIZE = 2 * FieldElement.SIZE
G2_SIZE = 2 * Fp2Element.SIZE

__all__ = [
    "G1_SIZE",
    "G2_SIZE",
    "LimbOrder",
    "encode_g1",
    "decode_g1",
    "encode_g2",
    "decode_g2",
    "g1_coordinates",
    "g2_coordinates",
]


def encode_g1(P: G1Point) -> bytes:
    "Return the 64 bytes representation of a G1 point."

    if not isinstance(P, G1Point):
        raise BN254TypeError(f"not a G1Point: {P!r}")
    # check that P is on curve
    P.require_on_curve()

    if P.is_identity():
        return b"\x00" * G1_SIZE
    return P.x.to_bytes() + P.y.to_bytes()


def decode_g1(octets: Octets) -> G1Point:
    """Return the G1 point from its 64 bytes representation.

    Both coordinates must be reduced modulo p
    and the point must be on the curve.
    """

    data = bytes_from_octets(octets, G1_SIZE)
    if data == b"\x00" * G1_SIZE:
        return G1Point.identity()

    x = FieldElement.from_bytes(data[: FieldElement.SIZE])
    y = FieldElement.from_bytes(data[FieldElement.SIZE :])
    P = G1Point(x, y, check_validity=False)
    if not P.is_on_curve():
        raise PointNotOnCurve(f"point not on curve: ({x}, {y})")
    return P


def encode_g2(P: G2Point, limb_order: LimbOrder = LimbOrder.C0_FIRST) -> bytes:
    "Return the 128 bytes representation of a G2 point."

    if not isinstance(P, G2Point):
        raise BN254TypeError(f"not a G2Point: {P!r}")
    P.require_on_curve()

    if P.is_identity():
        return b"\x00" * G2_SIZE
    return P.x.to_bytes(limb_order) + P.y.to_bytes(limb_order)


def decode_g2(octets: Octets, limb_order: LimbOrder = LimbOrder.C0_FIRST) -> G2Point:
    """Return the G2 point from its 128 bytes representation.

    All four limbs must be reduced modulo p
    and the point must be on the twisted curve.
    """

    data = bytes_from_octets(octets, G2_SIZE)
    if data == b"\x00" * G2_SIZE:
        return G2Point.identity()

    x = Fp2Element.from_bytes(data[: Fp2Element.SIZE], limb_order)
    y = Fp2Element.from_bytes(data[Fp2Element.SIZE :], limb_order)
    P = G2Point(x, y, check_validity=False)
    if not P.is_on_curve():
        raise PointNotOnCurve(f"point not on curve: ({x}, {y})")
    return P


def g1_coordinates(P: G1Point) -> IntPoint:
    "Return the integer coordinates, (0, 0) for the identity."

    if P.is_identity():
        return 0, 0
    return P.x.value, P.y.value


def g2_coordinates(P: G2Point, limb_order: LimbOrder = LimbOrder.C0_FIRST) -> IntPoint2:
    "Return the integer limbs of the coordinates, all zeros for the identity."

    if P.is_identity():
        zeros: Tuple[int, int] = (0, 0)
        return zeros, zeros
    return P.x.limbs(limb_order), P.y.limbs(limb_order)
