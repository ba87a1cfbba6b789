#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Pairing-friendly Curve class and the BN254 instance.

The bn254 instance is built, and fully validated,
once at import time; afterwards it is only read.
"""

import logging
from math import isqrt

from bn254keygen.ecc.curve_group import G1Point, G2Point, mult
from bn254keygen.ecc.field import FieldElement, Fp2Element, ScalarElement
from bn254keygen.ecc.number_theory import is_probable_prime
from bn254keygen.ecc.parameters import BN254_PARAMETERS, CurveParameters
from bn254keygen.exceptions import BN254ValueError
from bn254keygen.utils import hex_string, int_string

logger = logging.getLogger(__name__)

# the BN254 group order has 254 bits, i.e. 64 hex-digits
N_BIT_LENGTH = 254


class Curve:
    """Prime order groups G1 and G2 of a pairing-friendly curve.

    Parameters are checked following SEC 1 v.2 3.1.1.2.1,
    adapted to a curve with embedding degree k > 1.
    """

    def __init__(self, params: CurveParameters) -> None:

        self.name = params.name
        p = params.p
        n = params.n

        # 1. check that p is a prime, with p = 3 mod 4 for Fp2 = Fp[u]/(u^2 + 1)
        if not is_probable_prime(p):
            raise BN254ValueError(f"p is not prime: {int_string(p)}")
        if p % 4 != 3:
            raise BN254ValueError(f"p is not 3 mod 4: {int_string(p)}")
        if p != FieldElement.MODULUS:
            raise BN254ValueError(f"p / Fp modulus mismatch: {int_string(p)}")
        self.p = p
        self.p_size = (p.bit_length() + 7) // 8

        # 5. Check that n is prime and is the canonical BN254 order
        if not is_probable_prime(n):
            raise BN254ValueError(f"n is not prime: {int_string(n)}")
        if n.bit_length() != N_BIT_LENGTH:
            err_msg = f"n is not a {N_BIT_LENGTH}-bit integer: {int_string(n)}"
            raise BN254ValueError(err_msg)
        if n != ScalarElement.MODULUS:
            raise BN254ValueError(f"n / Fr modulus mismatch: {int_string(n)}")
        self.n = n
        self.n_size = (n.bit_length() + 7) // 8

        # also check n with Hasse Theorem
        delta = 2 * isqrt(p) + 2
        if params.cofactor != 1 or not p + 1 - delta <= n <= p + 1 + delta:
            err_msg = "n not in p+1-delta..p+1+delta: "
            err_msg += f"{int_string(n)}"
            raise BN254ValueError(err_msg)
        self.h = params.cofactor

        # 8. Check the embedding degree
        k = params.embedding_degree
        for i in range(1, k):
            if pow(p, i, n) == 1:
                raise BN254ValueError(f"embedding degree {i} instead of {k}")
        if pow(p, k, n) != 1:
            raise BN254ValueError(f"embedding degree is not {k}")
        self.embedding_degree = k

        # 4. Check that the generators are on their curves
        # 7. Check that G ≠ INF, nG = INF
        self.G1 = G1Point(*params.g1)
        self.G2 = G2Point(Fp2Element(*params.g2[0]), Fp2Element(*params.g2[1]))
        for G in (self.G1, self.G2):
            if G.is_identity():
                raise BN254ValueError("INF point cannot be a generator")
            if not mult(n, G).is_identity():
                err_msg = f"n is not the {type(G).__name__} generator order: "
                err_msg += f"{int_string(n)}"
                raise BN254ValueError(err_msg)

        logger.debug("%s parameters validated", self.name)

    def __str__(self) -> str:
        result = f"Curve {self.name}"
        result += f"\n p   = {hex_string(self.p)}"
        result += f"\n n   = {hex_string(self.n)}"
        result += f"\n h   = {self.h}"
        result += f"\n k   = {self.embedding_degree}"
        result += f"\n G1  = {self.G1}"
        result += f"\n G2  = {self.G2}"
        return result

    def __repr__(self) -> str:
        return f"Curve('{self.name}')"


bn254 = Curve(BN254_PARAMETERS)

P = bn254.p
N = bn254.n
G1_GENERATOR = bn254.G1
G2_GENERATOR = bn254.G2
