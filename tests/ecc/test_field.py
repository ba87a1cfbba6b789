#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `bn254keygen.ecc.field` module."

import secrets

import pytest

from bn254keygen.ecc.field import FieldElement, Fp2Element, LimbOrder, ScalarElement
from bn254keygen.exceptions import (
    ArithmeticDomainError,
    BN254TypeError,
    InvalidEncoding,
)

p = FieldElement.MODULUS
r = ScalarElement.MODULUS


def test_moduli() -> None:
    assert p == int(
        "21888242871839275222246405745257275088696311157297823662689037894645226208583"
    )
    assert r == int(
        "21888242871839275222246405745257275088548364400416034343698204186575808495617"
    )
    assert p % 4 == 3


def test_field_element_range() -> None:
    assert FieldElement(0).is_zero()
    assert FieldElement(p - 1).value == p - 1
    assert ScalarElement(r - 1).value == r - 1

    with pytest.raises(InvalidEncoding, match="FieldElement not in 0..modulus-1: "):
        FieldElement(p)
    with pytest.raises(InvalidEncoding, match="FieldElement not in 0..modulus-1: "):
        FieldElement(-1)
    with pytest.raises(InvalidEncoding, match="ScalarElement not in 0..modulus-1: "):
        ScalarElement(r)
    # r < p: a valid Fp value can be out of Fr range
    assert FieldElement(r).value == r

    with pytest.raises(BN254TypeError, match="not an int: "):
        FieldElement(True)  # type: ignore
    with pytest.raises(BN254TypeError, match="not an int: "):
        FieldElement(1.0)  # type: ignore


def test_field_arithmetic() -> None:
    a = FieldElement(p - 1)
    b = FieldElement(2)

    assert a + b == FieldElement(1)
    assert b - a == FieldElement(3)
    assert a - b == FieldElement(p - 3)
    assert a * a == FieldElement.one()
    assert -a == FieldElement(1)
    assert -FieldElement.zero() == FieldElement.zero()
    assert b.inverse() == FieldElement((p + 1) // 2)
    assert b * b.inverse() == FieldElement.one()
    assert FieldElement.one() / b == b.inverse()
    assert b**3 == FieldElement(8)
    assert b**-1 == b.inverse()
    assert b**0 == FieldElement.one()
    assert b.square() == FieldElement(4)

    # plain ints are reduced modulo p
    assert b + p == b
    assert 3 * b == FieldElement(6)
    assert 1 - b == a
    assert 1 / b == b.inverse()
    assert b + (-1) == FieldElement(1)

    x = FieldElement(1 + secrets.randbelow(p - 1))
    assert x * x.inverse() == FieldElement.one()
    assert x - x == FieldElement.zero()
    assert x + (-x) == FieldElement.zero()

    with pytest.raises(ArithmeticDomainError, match="inverse of zero in FieldElement"):
        FieldElement.zero().inverse()
    with pytest.raises(ArithmeticDomainError, match="inverse of zero"):
        b / 0
    with pytest.raises(ArithmeticDomainError, match="inverse of zero"):
        FieldElement.zero() ** -1


def test_field_mixing() -> None:
    one = FieldElement(1)
    # elements of different fields are never equal
    assert one != ScalarElement(1)
    assert one != 1

    with pytest.raises(BN254TypeError, match="cannot mix FieldElement and ScalarElement"):
        one + ScalarElement(1)  # type: ignore
    with pytest.raises(TypeError):
        one + "1"  # type: ignore
    with pytest.raises(TypeError):
        one * 1.0  # type: ignore


def test_field_conversions() -> None:
    x = FieldElement(0xDEADBEEF)
    assert int(x) == 0xDEADBEEF
    assert str(x) == "3735928559"
    assert repr(x) == "FieldElement(3735928559)"
    assert bool(x)
    assert not FieldElement.zero()

    x_bytes = x.to_bytes()
    assert len(x_bytes) == 32
    assert x_bytes == b"\x00" * 28 + b"\xde\xad\xbe\xef"
    assert FieldElement.from_bytes(x_bytes) == x
    assert FieldElement.from_bytes(x_bytes.hex()) == x
    assert x.to_hex() == "0x" + "0" * 56 + "deadbeef"
    assert len(FieldElement(p - 1).to_hex()) == 66

    assert FieldElement.from_string("3735928559") == x
    assert FieldElement.from_string("0xdeadbeef") == x
    assert FieldElement.from_string(x.to_hex()) == x
    assert FieldElement.from_integer(0xDEADBEEF) == x
    assert FieldElement.from_integer(x_bytes) == x
    assert FieldElement.from_integer("0xDEADBEEF") == x

    with pytest.raises(InvalidEncoding, match="invalid size: "):
        FieldElement.from_bytes(x_bytes[1:])
    with pytest.raises(InvalidEncoding, match="invalid size: "):
        FieldElement.from_bytes(b"\x00" + x_bytes)
    # unreduced values are rejected, not reduced
    with pytest.raises(InvalidEncoding, match="not in 0..modulus-1: "):
        FieldElement.from_bytes(p.to_bytes(32, "big"))
    with pytest.raises(InvalidEncoding, match="not a decimal or 0x-hex integer: "):
        FieldElement.from_string("deadbeef")
    with pytest.raises(BN254TypeError, match="not a string: "):
        FieldElement.from_string(12)  # type: ignore


def test_fp2_construction() -> None:
    z = Fp2Element(1, 2)
    assert z.c0 == FieldElement(1)
    assert z.c1 == FieldElement(2)
    assert Fp2Element(FieldElement(1), 2) == z
    assert Fp2Element() == Fp2Element.zero()
    assert Fp2Element(1) == Fp2Element.one()
    assert str(z) == "[1, 2]"
    assert repr(z) == "Fp2Element(1, 2)"

    with pytest.raises(InvalidEncoding, match="FieldElement not in 0..modulus-1: "):
        Fp2Element(p, 0)
    with pytest.raises(BN254TypeError, match="not a FieldElement: "):
        Fp2Element(ScalarElement(1), 0)  # type: ignore
    with pytest.raises(BN254TypeError, match="not a FieldElement: "):
        Fp2Element(1.0, 0)  # type: ignore


def test_fp2_arithmetic() -> None:
    u = Fp2Element(0, 1)
    a = Fp2Element(1, 2)
    b = Fp2Element(3, 4)

    assert u * u == Fp2Element(p - 1, 0)
    assert u**4 == Fp2Element.one()
    assert a + b == Fp2Element(4, 6)
    assert a - b == Fp2Element(p - 2, p - 2)
    assert 1 - a == Fp2Element(0, p - 2)
    # (1 + 2u)(3 + 4u) = 3 - 8 + (4 + 6)u
    assert a * b == Fp2Element(p - 5, 10)
    assert a * b == b * a
    assert a.square() == a * a
    assert a**3 == a * a * a
    assert a * 2 == Fp2Element(2, 4)
    assert 2 * a == a + a
    assert a * FieldElement(3) == Fp2Element(3, 6)
    assert a + FieldElement(1) == Fp2Element(2, 2)
    assert -a == Fp2Element(p - 1, p - 2)
    assert a.conjugate() == Fp2Element(1, p - 2)
    assert a.norm() == FieldElement(5)
    assert a * a.conjugate() == Fp2Element(a.norm())

    # 1 / (1 + u) = (1 - u) / 2
    half = FieldElement(2).inverse()
    assert Fp2Element(1, 1).inverse() == Fp2Element(half, -half)

    for _ in range(3):
        x = Fp2Element(secrets.randbelow(p), 1 + secrets.randbelow(p - 1))
        assert x * x.inverse() == Fp2Element.one()
        assert x / x == Fp2Element.one()
        assert x**-2 == (x * x).inverse()
        assert (x * b) / b == x

    with pytest.raises(ArithmeticDomainError, match="inverse of zero in Fp2Element"):
        Fp2Element.zero().inverse()
    with pytest.raises(ArithmeticDomainError, match="inverse of zero"):
        1 / Fp2Element.zero()
    with pytest.raises(BN254TypeError, match="cannot mix Fp2Element and ScalarElement"):
        a + ScalarElement(1)  # type: ignore
    with pytest.raises(TypeError):
        a + "1"  # type: ignore


def test_twist_coefficient() -> None:
    xi = Fp2Element(9, 1)
    b2 = Fp2Element(3) / xi
    assert b2 == Fp2Element(
        19485874751759354771024239261021720505790618469301721065564631296452457478373,
        266929791119991161246907387137283842545076965332900288569378510910307636690,
    )
    assert b2 * xi == Fp2Element(3)


def test_fp2_bytes() -> None:
    z = Fp2Element(1, 2)
    one = (1).to_bytes(32, "big")
    two = (2).to_bytes(32, "big")

    assert z.to_bytes() == one + two
    assert z.to_bytes(LimbOrder.C0_FIRST) == one + two
    assert z.to_bytes(LimbOrder.C1_FIRST) == two + one
    assert z.limbs() == (1, 2)
    assert z.limbs(LimbOrder.C1_FIRST) == (2, 1)

    assert Fp2Element.from_bytes(one + two) == z
    assert Fp2Element.from_bytes(two + one, LimbOrder.C1_FIRST) == z
    assert Fp2Element.from_bytes((one + two).hex()) == z
    # the same bytes read with the other limb order
    assert Fp2Element.from_bytes(one + two, LimbOrder.C1_FIRST) == Fp2Element(2, 1)

    with pytest.raises(InvalidEncoding, match="invalid size: "):
        Fp2Element.from_bytes(one)
    with pytest.raises(InvalidEncoding, match="not in 0..modulus-1: "):
        Fp2Element.from_bytes(one + p.to_bytes(32, "big"))


def test_limb_order() -> None:
    assert LimbOrder("c0-first") is LimbOrder.C0_FIRST
    assert LimbOrder("c1-first") is LimbOrder.C1_FIRST


def test_fp2_strings() -> None:
    z = Fp2Element(1, 0xDEADBEEF)
    c0_hex = "0x" + "0" * 63 + "1"
    c1_hex = "0x" + "0" * 56 + "deadbeef"

    assert z.to_hex() == (c0_hex, c1_hex)
    assert z.to_hex(LimbOrder.C1_FIRST) == (c1_hex, c0_hex)
    assert Fp2Element.from_string(c0_hex, c1_hex) == z
    assert Fp2Element.from_string("1", "3735928559") == z
    assert Fp2Element.from_string(*z.to_hex()) == z

    with pytest.raises(InvalidEncoding, match="not a decimal or 0x-hex integer: "):
        Fp2Element.from_string("1", "deadbeef")
    with pytest.raises(InvalidEncoding, match="FieldElement not in 0..modulus-1: "):
        Fp2Element.from_string(str(p), "0")
    with pytest.raises(BN254TypeError, match="not a string: "):
        Fp2Element.from_string(1, "0")  # type: ignore
