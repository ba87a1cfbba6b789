#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve diagnostics functions.

These functions are meant to classify a point coming from
an arithmetic backend of unknown conventions:

* which y^2 = x^3 + b candidate equations it satisfies
* whether it is the reference base point, or its negation,
  of a given generator convention

Different BN254 backends do not agree on the G1 base point:
gnark-crypto and the EVM use (1, 2),
golang.org/x/crypto/bn256 uses (1, -2).

The relation check only detects equality and negation;
it does not attempt to solve a discrete logarithm.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Tuple, Union

from dataclasses_json import DataClassJsonMixin, config

from bn254keygen.alias import Integer
from bn254keygen.ecc.curve import bn254
from bn254keygen.ecc.curve_group import CurveGroup, G1Point, mult
from bn254keygen.ecc.field import FieldElement, ScalarElement
from bn254keygen.exceptions import BN254TypeError

# b coefficients tried by classify_curve; b = 3 is BN254
CANDIDATE_B: Tuple[int, ...] = (0, 1, 2, 3, 4, 5)

Coordinate = Union[FieldElement, Integer]


class GeneratorConvention(Enum):
    "G1 base point conventions found in BN254 backends."

    # gnark-crypto, EVM precompiles, Solidity BN254.generatorG1()
    STANDARD_BASE_POINT = "standard"
    # golang.org/x/crypto/bn256 ScalarBaseMult
    BACKEND_DEFAULT_BASE_POINT = "backend-default"


class RelationResult(Enum):
    EQUALS_REFERENCE = "equals-reference"
    IS_NEGATION_OF_REFERENCE = "is-negation-of-reference"
    NO_RELATION_FOUND = "no-relation-found"


def _int_from_hex(hex_: str) -> int:
    return int(hex_, 16)


def _field_element(c: Coordinate) -> FieldElement:
    if isinstance(c, FieldElement):
        return c
    if isinstance(c, (int, str, bytes)) and not isinstance(c, bool):
        return FieldElement.from_integer(c)
    raise BN254TypeError(f"not a coordinate: {c!r}")


def base_point(convention: GeneratorConvention) -> G1Point:
    "Return the G1 base point of the given convention."

    G = bn254.G1
    if convention is GeneratorConvention.BACKEND_DEFAULT_BASE_POINT:
        return G.negate()
    return G


def classify_curve(
    x: Coordinate, y: Coordinate, candidates: Iterable[int] = CANDIDATE_B
) -> FrozenSet[int]:
    """Return all candidate b values for which y^2 = x^3 + b (mod p).

    Usually the result has exactly one element;
    it is empty if the point is off every tested curve.
    """

    x_, y_ = _field_element(x), _field_element(y)
    return frozenset(
        b
        for b in candidates
        if CurveGroup(FieldElement, b, discriminant_check=False).is_on_curve(x_, y_)
    )


def check_known_relation(
    x: Coordinate,
    y: Coordinate,
    convention: GeneratorConvention = GeneratorConvention.STANDARD_BASE_POINT,
) -> RelationResult:
    "Return the relation between (x, y) and the convention base point."

    x_, y_ = _field_element(x), _field_element(y)
    G = base_point(convention)
    if x_ != G.x:
        return RelationResult.NO_RELATION_FOUND
    if y_ == G.y:
        return RelationResult.EQUALS_REFERENCE
    if y_ == -G.y:
        return RelationResult.IS_NEGATION_OF_REFERENCE
    return RelationResult.NO_RELATION_FOUND


@dataclass(frozen=True)
class CurveReport(DataClassJsonMixin):
    x: int = field(metadata=config(encoder=hex, decoder=_int_from_hex))
    y: int = field(metadata=config(encoder=hex, decoder=_int_from_hex))
    curves: List[int]
    on_bn254: bool
    convention: GeneratorConvention = field(
        metadata=config(encoder=lambda v: v.value, decoder=GeneratorConvention)
    )
    relation: RelationResult = field(
        metadata=config(encoder=lambda v: v.value, decoder=RelationResult)
    )


def diagnose(
    x: Coordinate,
    y: Coordinate,
    convention: GeneratorConvention = GeneratorConvention.STANDARD_BASE_POINT,
    candidates: Iterable[int] = CANDIDATE_B,
) -> CurveReport:
    "Return the full diagnostics of (x, y)."

    x_, y_ = _field_element(x), _field_element(y)
    curves = sorted(classify_curve(x_, y_, candidates))
    return CurveReport(
        x=x_.value,
        y=y_.value,
        curves=curves,
        on_bn254=G1Point(x_, y_, check_validity=False).is_on_curve(),
        convention=convention,
        relation=check_known_relation(x_, y_, convention),
    )


@dataclass(frozen=True)
class ConventionComparison:
    standard: G1Point
    backend_default: G1Point

    @property
    def same_result(self) -> bool:
        return self.standard == self.backend_default

    @property
    def negated_result(self) -> bool:
        return self.standard == self.backend_default.negate()


def compare_conventions(scalar: Union[int, ScalarElement]) -> ConventionComparison:
    """Return scalar times the base point of both conventions.

    As the two base points are opposite,
    the results coincide only when they are the identity;
    otherwise they are each other's negation.
    """

    return ConventionComparison(
        standard=mult(
            scalar, base_point(GeneratorConvention.STANDARD_BASE_POINT)
        ),
        backend_default=mult(
            scalar, base_point(GeneratorConvention.BACKEND_DEFAULT_BASE_POINT)
        ),
    )

