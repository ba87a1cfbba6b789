#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Finite field elements: Fp, Fr, and the quadratic extension Fp2.

Elements are immutable values: every operation returns a new element.
Plain ints are accepted as operands and reduced modulo the field prime,
so that expressions like 3 * x * x read as they do on paper.

Fp2 = Fp[u] / (u^2 + 1), u^2 + 1 being irreducible as p = 3 mod 4.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple, Type, TypeVar, Union

from bn254keygen.alias import Integer, Octets
from bn254keygen.ecc.number_theory import mod_inv
from bn254keygen.ecc.parameters import BN254_PARAMETERS
from bn254keygen.exceptions import (
    ArithmeticDomainError,
    BN254TypeError,
    InvalidEncoding,
)
from bn254keygen.utils import bytes_from_octets, int_from_integer, int_string

_PFE = TypeVar("_PFE", bound="PrimeFieldElement")


@dataclass(frozen=True, repr=False)
class PrimeFieldElement:
    """Integer modulo a prime, in the canonical range 0..MODULUS-1.

    Subclasses bind MODULUS; elements of different subclasses
    are never equal and cannot be mixed in arithmetic.
    """

    value: int

    MODULUS: ClassVar[int] = 0
    # byte-size of the big-endian encoding
    SIZE: ClassVar[int] = 32

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise BN254TypeError(f"not an int: {self.value!r}")
        if not 0 <= self.value < self.MODULUS:
            err_msg = f"{type(self).__name__} not in 0..modulus-1: "
            err_msg += int_string(self.value) if self.value >= 0 else f"{self.value}"
            raise InvalidEncoding(err_msg)

    @classmethod
    def zero(cls: Type[_PFE]) -> _PFE:
        return cls(0)

    @classmethod
    def one(cls: Type[_PFE]) -> _PFE:
        return cls(1)

    def _coerce(self: _PFE, other: object) -> Optional[_PFE]:
        if type(other) is type(self):
            return other  # type: ignore
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other % self.MODULUS)
        if isinstance(other, PrimeFieldElement):
            err_msg = f"cannot mix {type(self).__name__} "
            err_msg += f"and {type(other).__name__}"
            raise BN254TypeError(err_msg)
        return None

    def __add__(self: _PFE, other: object) -> _PFE:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return type(self)((self.value + o.value) % self.MODULUS)

    __radd__ = __add__

    def __sub__(self: _PFE, other: object) -> _PFE:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return type(self)((self.value - o.value) % self.MODULUS)

    def __rsub__(self: _PFE, other: object) -> _PFE:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return type(self)((o.value - self.value) % self.MODULUS)

    def __mul__(self: _PFE, other: object) -> _PFE:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return type(self)((self.value * o.value) % self.MODULUS)

    __rmul__ = __mul__

    def __truediv__(self: _PFE, other: object) -> _PFE:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __rtruediv__(self: _PFE, other: object) -> _PFE:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inverse()

    def __neg__(self: _PFE) -> _PFE:
        return type(self)((self.MODULUS - self.value) % self.MODULUS)

    def __pow__(self: _PFE, e: int) -> _PFE:
        if e < 0:
            return self.inverse() ** (-e)
        return type(self)(pow(self.value, e, self.MODULUS))

    def square(self: _PFE) -> _PFE:
        return self * self

    def inverse(self: _PFE) -> _PFE:
        "Return the multiplicative inverse; zero has none."
        if self.value == 0:
            raise ArithmeticDomainError(f"inverse of zero in {type(self).__name__}")
        return type(self)(mod_inv(self.value, self.MODULUS))

    def is_zero(self) -> bool:
        return self.value == 0

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"

    def to_bytes(self) -> bytes:
        "Return the 32 bytes big-endian encoding."
        return self.value.to_bytes(self.SIZE, byteorder="big", signed=False)

    @classmethod
    def from_bytes(cls: Type[_PFE], octets: Octets) -> _PFE:
        """Return the element from its 32 bytes big-endian encoding.

        Values not reduced modulo the field prime are rejected,
        not silently reduced.
        """
        data = bytes_from_octets(octets, cls.SIZE)
        return cls(int.from_bytes(data, byteorder="big", signed=False))

    def to_hex(self) -> str:
        "Return the 0x-prefixed, 64 hex-digits, zero-padded representation."
        return "0x" + format(self.value, f"0{2 * self.SIZE}x")

    @classmethod
    def from_string(cls: Type[_PFE], string: str) -> _PFE:
        "Return the element from a decimal or 0x-prefixed hex-string."
        if not isinstance(string, str):
            raise BN254TypeError(f"not a string: {string!r}")
        return cls(int_from_integer(string))

    @classmethod
    def from_integer(cls: Type[_PFE], i: Integer) -> _PFE:
        "Return the element from any supported integer representation."
        if isinstance(i, bytes):
            return cls.from_bytes(i)
        return cls(int_from_integer(i))


class FieldElement(PrimeFieldElement):
    "Element of the BN254 base field Fp."

    MODULUS = BN254_PARAMETERS.p


class ScalarElement(PrimeFieldElement):
    "Element of the BN254 scalar field Fr, r being the group order."

    MODULUS = BN254_PARAMETERS.n


class LimbOrder(Enum):
    """Serialization order of the two Fp limbs of an Fp2 element.

    C0_FIRST: c0 || c1, i.e. (real, imaginary)
    C1_FIRST: c1 || c0, i.e. (imaginary, real), as in the
    EIP-197 precompile input and in Solidity BN254.G2Point arrays
    """

    C0_FIRST = "c0-first"
    C1_FIRST = "c1-first"


def _fp(c: Union[FieldElement, int]) -> FieldElement:
    if isinstance(c, FieldElement):
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return FieldElement(c)
    raise BN254TypeError(f"not a FieldElement: {c!r}")


@dataclass(frozen=True, repr=False)
class Fp2Element:
    "Element c0 + c1*u of Fp2, with u^2 = -1."

    c0: FieldElement
    c1: FieldElement

    SIZE: ClassVar[int] = 2 * FieldElement.SIZE

    def __init__(
        self, c0: Union[FieldElement, int] = 0, c1: Union[FieldElement, int] = 0
    ) -> None:

        object.__setattr__(self, "c0", _fp(c0))
        object.__setattr__(self, "c1", _fp(c1))

    @classmethod
    def zero(cls) -> "Fp2Element":
        return cls(0, 0)

    @classmethod
    def one(cls) -> "Fp2Element":
        return cls(1, 0)

    @staticmethod
    def _coerce(other: object) -> Optional["Fp2Element"]:
        if isinstance(other, Fp2Element):
            return other
        if isinstance(other, FieldElement):
            return Fp2Element(other, 0)
        if isinstance(other, int) and not isinstance(other, bool):
            return Fp2Element(other % FieldElement.MODULUS, 0)
        if isinstance(other, PrimeFieldElement):
            raise BN254TypeError(f"cannot mix Fp2Element and {type(other).__name__}")
        return None

    def __add__(self, other: object) -> "Fp2Element":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fp2Element(self.c0 + o.c0, self.c1 + o.c1)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Fp2Element":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fp2Element(self.c0 - o.c0, self.c1 - o.c1)

    def __rsub__(self, other: object) -> "Fp2Element":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fp2Element(o.c0 - self.c0, o.c1 - self.c1)

    def __mul__(self, other: object) -> "Fp2Element":
        if isinstance(other, (FieldElement, int)) and not isinstance(other, bool):
            # scaling by an Fp element
            return Fp2Element(self.c0 * other, self.c1 * other)
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        # (a0 + a1*u) * (b0 + b1*u) = a0*b0 - a1*b1 + (a0*b1 + a1*b0)*u
        return Fp2Element(
            self.c0 * o.c0 - self.c1 * o.c1, self.c0 * o.c1 + self.c1 * o.c0
        )

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Fp2Element":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * o.inverse()

    def __rtruediv__(self, other: object) -> "Fp2Element":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o * self.inverse()

    def __neg__(self) -> "Fp2Element":
        return Fp2Element(-self.c0, -self.c1)

    def __pow__(self, e: int) -> "Fp2Element":
        if e < 0:
            return self.inverse() ** (-e)
        result, base = Fp2Element.one(), self
        while e:
            if e & 1:
                result = result * base
            base, e = base.square(), e >> 1
        return result

    def square(self) -> "Fp2Element":
        # (a0 + a1*u)^2 = (a0 + a1)(a0 - a1) + 2*a0*a1*u
        return Fp2Element(
            (self.c0 + self.c1) * (self.c0 - self.c1), 2 * self.c0 * self.c1
        )

    def conjugate(self) -> "Fp2Element":
        return Fp2Element(self.c0, -self.c1)

    def norm(self) -> FieldElement:
        "Return c0^2 + c1^2, i.e. self * conjugate(self)."
        return self.c0.square() + self.c1.square()

    def inverse(self) -> "Fp2Element":
        "Return conjugate / norm; zero has no inverse."
        norm = self.norm()
        if norm.is_zero():
            raise ArithmeticDomainError("inverse of zero in Fp2Element")
        inv_norm = norm.inverse()
        return Fp2Element(self.c0 * inv_norm, -self.c1 * inv_norm)

    def is_zero(self) -> bool:
        return self.c0.is_zero() and self.c1.is_zero()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return f"[{self.c0}, {self.c1}]"

    def __repr__(self) -> str:
        return f"Fp2Element({self.c0.value}, {self.c1.value})"

    def to_hex(self, limb_order: LimbOrder = LimbOrder.C0_FIRST) -> Tuple[str, str]:
        "Return the two limbs as 0x-prefixed, 64 hex-digits strings."
        if limb_order is LimbOrder.C1_FIRST:
            return self.c1.to_hex(), self.c0.to_hex()
        return self.c0.to_hex(), self.c1.to_hex()

    @classmethod
    def from_string(cls, c0: str, c1: str) -> "Fp2Element":
        "Return the element from decimal or 0x-prefixed hex-string limbs."
        return cls(FieldElement.from_string(c0), FieldElement.from_string(c1))

    def limbs(self, limb_order: LimbOrder = LimbOrder.C0_FIRST) -> Tuple[int, int]:
        "Return the two limbs as ints, in the requested order."
        if limb_order is LimbOrder.C1_FIRST:
            return self.c1.value, self.c0.value
        return self.c0.value, self.c1.value

    def to_bytes(self, limb_order: LimbOrder = LimbOrder.C0_FIRST) -> bytes:
        "Return the 64 bytes encoding: two 32 bytes big-endian limbs."
        if limb_order is LimbOrder.C1_FIRST:
            return self.c1.to_bytes() + self.c0.to_bytes()
        return self.c0.to_bytes() + self.c1.to_bytes()

    @classmethod
    def from_bytes(
        cls, octets: Octets, limb_order: LimbOrder = LimbOrder.C0_FIRST
    ) -> "Fp2Element":
        data = bytes_from_octets(octets, cls.SIZE)
        first = FieldElement.from_bytes(data[: FieldElement.SIZE])
        second = FieldElement.from_bytes(data[FieldElement.SIZE :])
        if limb_order is LimbOrder.C1_FIRST:
            return cls(second, first)
        return cls(first, second)
