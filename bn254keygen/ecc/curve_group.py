#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class, affine points, and scalar multiplication.

CurveGroup is the set of solutions of a short Weierstrass equation
y^2 = x^3 + b over a coordinate field (Fp or Fp2),
together with a point at infinity.

G1Point and G2Point are affine points of the BN254 curve over Fp
and of its sextic twist over Fp2, respectively.
For the prime order cyclic groups and their generators,
see the bn254keygen.ecc.curve module.
"""

import functools
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Type, TypeVar, Union

from bn254keygen.ecc.field import FieldElement, Fp2Element, ScalarElement
from bn254keygen.ecc.parameters import BN254_PARAMETERS
from bn254keygen.exceptions import (
    ArithmeticDomainError,
    BN254TypeError,
    BN254ValueError,
    PointNotOnCurve,
)

# FieldElement or Fp2Element
Coordinate = Any


class CurveGroup:
    """Finite group of the points of an elliptic curve y^2 = x^3 + b.

    The coordinate field is either Fp (FieldElement) or Fp2 (Fp2Element).
    The constant b must satisfy the relationship 27 b^2 ≠ 0,
    i.e. the curve must not be singular;
    the check can be disabled to test points
    against degenerate candidate equations.
    """

    def __init__(
        self,
        field: Type[Coordinate],
        b: Any,
        name: str = "",
        discriminant_check: bool = True,
    ) -> None:

        self.field = field
        self.name = name
        self.b = self.element(b)

        if discriminant_check and (27 * self.b * self.b).is_zero():
            raise BN254ValueError("zero discriminant")

    def __str__(self) -> str:
        result = f"Curve {self.name}" if self.name else "Curve"
        result += f"\n field = {self.field.__name__}"
        result += f"\n b     = {self.b}"
        return result

    def __repr__(self) -> str:
        return f"CurveGroup({self.field.__name__}, {self.b!r})"

    def element(self, value: Any) -> Coordinate:
        "Return value as an element of the coordinate field."
        if isinstance(value, self.field):
            return value
        if isinstance(value, (tuple, list)):
            return self.field(*value)
        return self.field(value)

    def y2(self, x: Coordinate) -> Coordinate:
        "Return x^3 + b, i.e. the right-hand side of the curve equation."
        return x * x * x + self.b

    def is_on_curve(self, x: Coordinate, y: Coordinate) -> bool:
        "Return True if the affine coordinates satisfy the curve equation."
        return y.square() == self.y2(x)


_P = TypeVar("_P", bound="AffinePoint")


@dataclass(frozen=True, repr=False)
class AffinePoint:
    """Elliptic curve point in affine coordinates.

    The point at infinity (the group identity) has both coordinates None.
    Curve membership is checked at construction,
    unless check_validity is False.
    """

    x: Optional[Coordinate]
    y: Optional[Coordinate]

    EC: ClassVar[CurveGroup]

    def __init__(
        self, x: Any = None, y: Any = None, check_validity: bool = True
    ) -> None:

        if (x is None) != (y is None):
            err_msg = "identity must have both coordinates None, "
            err_msg += f"not ({x!r}, {y!r})"
            raise BN254TypeError(err_msg)
        if x is not None:
            x = self.EC.element(x)
            y = self.EC.element(y)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

        if check_validity:
            self.require_on_curve()

    @classmethod
    def identity(cls: Type[_P]) -> _P:
        return cls(None, None)

    def is_identity(self) -> bool:
        return self.x is None

    def is_on_curve(self) -> bool:
        "Return True if the point is on the curve; the identity always is."
        if self.is_identity():
            return True
        return self.EC.is_on_curve(self.x, self.y)

    def require_on_curve(self) -> None:
        """Require the point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve():
            raise PointNotOnCurve(f"point not on curve: {self!r}")

    def __str__(self) -> str:
        if self.is_identity():
            return "INF"
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        if self.is_identity():
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.x!r}, {self.y!r})"

    def _require_same_group(self, other: object) -> None:
        if type(other) is not type(self):
            err_msg = f"cannot combine {type(self).__name__} "
            err_msg += f"and {type(other).__name__}"
            raise BN254TypeError(err_msg)

    def negate(self: _P) -> _P:
        "Return the opposite point."
        if self.is_identity():
            return self
        return type(self)(self.x, -self.y, check_validity=False)

    def double(self: _P) -> _P:
        """Return 2*self, using the tangent line.

        A point with y = 0 would be of order two:
        no such point exists in the odd order BN254 groups,
        so it can only come from unchecked coordinates.
        """
        if self.is_identity():
            return self
        if self.y.is_zero():
            raise ArithmeticDomainError(f"doubling a point with y = 0: {self!r}")

        lam = (3 * self.x * self.x) / (2 * self.y)
        x = lam * lam - self.x - self.x
        y = lam * (self.x - x) - self.y
        return type(self)(x, y)

    def add(self: _P, other: _P) -> _P:
        "Return the sum of two points, using the chord line."

        self._require_same_group(other)
        if self.is_identity():
            return other
        if other.is_identity():
            return self

        if self.x == other.x:
            if self.y == other.y:  # point doubling
                return self.double()
            if self.y == -other.y:  # opposite points
                return type(self).identity()
            err_msg = "same x-coordinate, but neither equal nor opposite points: "
            err_msg += f"{self!r}, {other!r}"
            raise ArithmeticDomainError(err_msg)

        lam = (other.y - self.y) / (other.x - self.x)
        x = lam * lam - self.x - other.x
        y = lam * (self.x - x) - self.y
        return type(self)(x, y)

    def __neg__(self: _P) -> _P:
        return self.negate()

    def __add__(self: _P, other: object) -> _P:
        if not isinstance(other, AffinePoint):
            return NotImplemented
        return self.add(other)  # type: ignore

    def __sub__(self: _P, other: object) -> _P:
        if not isinstance(other, AffinePoint):
            return NotImplemented
        return self.add(other.negate())  # type: ignore

    def __mul__(self: _P, m: object) -> _P:
        if not isinstance(m, (int, ScalarElement)):
            return NotImplemented
        return mult(m, self)

    __rmul__ = __mul__


def mult(m: Union[int, ScalarElement], Q: _P) -> _P:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses
    'double & add' algorithm,
    'left-to-right' binary decomposition of the m coefficient,
    affine coordinates.
    It is not constant-time.

    The loop is a fold over the bits of m: each step
    produces a new point from the previous one,
    starting from the identity.

    The m coefficient is not reduced mod n,
    so that n*G is the identity for a generator G of order n.
    """

    if isinstance(m, ScalarElement):
        m = m.value
    if not isinstance(m, int) or isinstance(m, bool):
        raise BN254TypeError(f"not an int: {m!r}")
    if m < 0:
        raise BN254ValueError(f"negative m: {hex(m)}")

    def step(R: _P, bit: str) -> _P:
        R = R.double()
        return R.add(Q) if bit == "1" else R

    return functools.reduce(step, bin(m)[2:], type(Q).identity())


class G1Point(AffinePoint):
    "Point of the BN254 curve y^2 = x^3 + 3 over Fp."

    EC = CurveGroup(FieldElement, BN254_PARAMETERS.b, "bn254 G1")


# the G2 curve is the D-type sextic twist y^2 = x^3 + b / xi
_XI = Fp2Element(*BN254_PARAMETERS.xi)


class G2Point(AffinePoint):
    "Point of the BN254 sextic twist y^2 = x^3 + 3/(9+u) over Fp2."

    EC = CurveGroup(Fp2Element, Fp2Element(BN254_PARAMETERS.b) / _XI, "bn254 G2")
