#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `bn254keygen.ecc.point_codec` module."

import secrets

import pytest

from bn254keygen.ecc.curve import G1_GENERATOR, G2_GENERATOR, N, P
from bn254keygen.ecc.curve_group import G1Point, G2Point, mult
from bn254keygen.ecc.point_codec import (
    G1_SIZE,
    G2_SIZE,
    LimbOrder,
    decode_g1,
    decode_g2,
    encode_g1,
    encode_g2,
    g1_coordinates,
    g2_coordinates,
)
from bn254keygen.exceptions import BN254TypeError, InvalidEncoding, PointNotOnCurve

G2_HEX = (
    "1800deef121f1e76426a00665e5c4479674322d4f75edadd46debd5cd992f6ed"
    "198e9393920d483a7260bfb731fb5d25f1aa493335a9e71297e485b7aef312c2"
    "12c85ea5db8c6deb4aab71808dcb408fe3d1e7690c43d37b4ce6cc0166fa7daa"
    "090689d0585ff075ec9e99ad690c3395bc4b313370b38ef355acdadcd122975b"
)
# the same point, EIP-197 limb order
G2_HEX_C1_FIRST = (
    "198e9393920d483a7260bfb731fb5d25f1aa493335a9e71297e485b7aef312c2"
    "1800deef121f1e76426a00665e5c4479674322d4f75edadd46debd5cd992f6ed"
    "090689d0585ff075ec9e99ad690c3395bc4b313370b38ef355acdadcd122975b"
    "12c85ea5db8c6deb4aab71808dcb408fe3d1e7690c43d37b4ce6cc0166fa7daa"
)
G2_2_HEX = (
    "27dc7234fd11d3e8c36c59277c3e6f149d5cd3cfa9a62aee49f8130962b4b3b9"
    "203e205db4f19b37b60121b83a7333706db86431c6d835849957ed8c3928ad79"
    "04bb53b8977e5f92a0bc372742c4830944a59b4fe6b1c0466e2a6dad122b5d2e"
    "195e8aa5b7827463722b8c153931579d3505566b4edf48d498e185f0509de152"
)


def test_sizes() -> None:
    assert G1_SIZE == 64
    assert G2_SIZE == 128


def test_encode_g1() -> None:
    G_bytes = encode_g1(G1_GENERATOR)
    assert len(G_bytes) == G1_SIZE
    assert G_bytes == b"\x00" * 31 + b"\x01" + b"\x00" * 31 + b"\x02"

    # EIP-196 test vector
    G1_2 = mult(2, G1_GENERATOR)
    assert encode_g1(G1_2).hex() == (
        "030644e72e131a029b85045b68181585d97816a916871ca8d3c208c16d87cfd3"
        "15ed738c0e0a7c92e7845f96b2ae9c0a68a6a449e3538fc7ff3ebf7a5a18a2c4"
    )

    assert encode_g1(G1Point.identity()) == b"\x00" * G1_SIZE

    with pytest.raises(BN254TypeError, match="not a G1Point: "):
        encode_g1(G2_GENERATOR)  # type: ignore
    with pytest.raises(PointNotOnCurve, match="point not on curve: "):
        encode_g1(G1Point(1, 3, check_validity=False))


def test_decode_g1() -> None:
    G_bytes = encode_g1(G1_GENERATOR)
    assert decode_g1(G_bytes) == G1_GENERATOR
    assert decode_g1(G_bytes.hex()) == G1_GENERATOR
    assert decode_g1("0x" + G_bytes.hex()) == G1_GENERATOR
    assert decode_g1(b"\x00" * G1_SIZE) == G1Point.identity()

    q = 1 + secrets.randbelow(N - 1)
    Q = mult(q, G1_GENERATOR)
    assert decode_g1(encode_g1(Q)) == Q

    # (1, 3) is not on y^2 = x^3 + 3
    not_on_curve = (1).to_bytes(32, "big") + (3).to_bytes(32, "big")
    with pytest.raises(PointNotOnCurve, match="point not on curve: "):
        decode_g1(not_on_curve)

    with pytest.raises(InvalidEncoding, match="invalid size: 63 bytes instead of 64"):
        decode_g1(G_bytes[:-1])
    with pytest.raises(InvalidEncoding, match="invalid size: 65 bytes instead of 64"):
        decode_g1(G_bytes + b"\x00")

    # coordinates must be reduced modulo p
    unreduced = (1).to_bytes(32, "big") + (P + 2).to_bytes(32, "big")
    with pytest.raises(InvalidEncoding, match="not in 0..modulus-1: "):
        decode_g1(unreduced)


def test_encode_g2() -> None:
    assert encode_g2(G2_GENERATOR).hex() == G2_HEX
    assert encode_g2(G2_GENERATOR, LimbOrder.C0_FIRST).hex() == G2_HEX
    assert encode_g2(G2_GENERATOR, LimbOrder.C1_FIRST).hex() == G2_HEX_C1_FIRST
    assert encode_g2(mult(2, G2_GENERATOR)).hex() == G2_2_HEX

    assert encode_g2(G2Point.identity()) == b"\x00" * G2_SIZE
    assert encode_g2(G2Point.identity(), LimbOrder.C1_FIRST) == b"\x00" * G2_SIZE

    with pytest.raises(BN254TypeError, match="not a G2Point: "):
        encode_g2(G1_GENERATOR)  # type: ignore
    with pytest.raises(PointNotOnCurve, match="point not on curve: "):
        encode_g2(G2Point((1, 0), (2, 0), check_validity=False))


def test_decode_g2() -> None:
    assert decode_g2(G2_HEX) == G2_GENERATOR
    assert decode_g2(bytes.fromhex(G2_HEX), LimbOrder.C0_FIRST) == G2_GENERATOR
    assert decode_g2(G2_HEX_C1_FIRST, LimbOrder.C1_FIRST) == G2_GENERATOR
    assert decode_g2(b"\x00" * G2_SIZE) == G2Point.identity()

    q = 1 + secrets.randbelow(N - 1)
    Q = mult(q, G2_GENERATOR)
    for limb_order in LimbOrder:
        assert decode_g2(encode_g2(Q, limb_order), limb_order) == Q

    # the wrong limb order gives an off-curve point
    with pytest.raises(PointNotOnCurve, match="point not on curve: "):
        decode_g2(G2_HEX_C1_FIRST)
    with pytest.raises(PointNotOnCurve, match="point not on curve: "):
        decode_g2(G2_HEX, LimbOrder.C1_FIRST)

    with pytest.raises(InvalidEncoding, match="invalid size: 64 bytes instead of 128"):
        decode_g2(bytes.fromhex(G2_HEX)[:64])
    with pytest.raises(InvalidEncoding, match="not in 0..modulus-1: "):
        decode_g2("ff" * 32 + G2_HEX[64:])


def test_coordinates() -> None:
    assert g1_coordinates(G1_GENERATOR) == (1, 2)
    assert g1_coordinates(G1Point.identity()) == (0, 0)

    x, y = g2_coordinates(G2_GENERATOR)
    assert x == (
        10857046999023057135944570762232829481370756359578518086990519993285655852781,
        11559732032986387107991004021392285783925812861821192530917403151452391805634,
    )
    assert y == (
        8495653923123431417604973247489272438418190587263600148770280649306958101930,
        4082367875863433681332203403145435568316851327593401208105741076214120093531,
    )
    x1, y1 = g2_coordinates(G2_GENERATOR, LimbOrder.C1_FIRST)
    assert x1 == x[::-1]
    assert y1 == y[::-1]
    assert g2_coordinates(G2Point.identity()) == ((0, 0), (0, 0))
