#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BN254 key pair derivation.

A private key is a scalar q in 1..n-1;
the public keys are q*G1 and q*G2,
serialized in the verifier contract layout (64 + 128 bytes).

All functions are pure: they can be called concurrently
and always give the same result for the same scalar.
"""

from concurrent.futures import ProcessPoolExecutor
from dataclasses import InitVar, dataclass
from functools import partial
from typing import Iterable, List, Optional, Tuple, Union

from dataclasses_json import DataClassJsonMixin

from bn254keygen.ecc.curve import bn254
from bn254keygen.ecc.curve_group import G1Point, G2Point, mult
from bn254keygen.ecc.field import LimbOrder, ScalarElement
from bn254keygen.ecc.point_codec import encode_g1, encode_g2
from bn254keygen.exceptions import BN254TypeError, BN254ValueError, ScalarOutOfRange
from bn254keygen.utils import bytes_from_octets, int_from_integer

# private key inputs:
# native int, ScalarElement,
# decimal or 0x-prefixed hex-string, 32 bytes big-endian
Scalar = Union[int, ScalarElement, str, bytes]

PublicKeyBytes = Tuple[bytes, bytes]


def int_from_scalar(scalar: Scalar) -> int:
    "Return a verified-as-valid private key integer."

    if isinstance(scalar, ScalarElement):
        q = scalar.value
    elif isinstance(scalar, bool):
        raise BN254TypeError(f"not a private key: {scalar!r}")
    elif isinstance(scalar, bytes):
        q = int.from_bytes(bytes_from_octets(scalar, bn254.n_size), "big")
    elif isinstance(scalar, (int, str)):
        q = int_from_integer(scalar)
    else:
        raise BN254TypeError(f"not a private key: {scalar!r}")

    if not 0 < q < bn254.n:
        raise ScalarOutOfRange(f"private key not in 1..n-1: {hex(q).upper()}")

    return q


def derive_points(scalar: Scalar) -> Tuple[G1Point, G2Point]:
    "Return the public key points q*G1 and q*G2."

    q = int_from_scalar(scalar)
    return mult(q, bn254.G1), mult(q, bn254.G2)


def derive(
    scalar: Scalar, limb_order: LimbOrder = LimbOrder.C0_FIRST
) -> PublicKeyBytes:
    "Return the 64 bytes G1 and 128 bytes G2 public keys."

    pub_g1, pub_g2 = derive_points(scalar)
    return encode_g1(pub_g1), encode_g2(pub_g2, limb_order)


def derive_batch(
    scalars: Iterable[Scalar],
    limb_order: LimbOrder = LimbOrder.C0_FIRST,
    max_workers: Optional[int] = None,
) -> List[PublicKeyBytes]:
    """Return the public keys of many scalars, in input order.

    Scalars are spread over worker processes,
    as the arithmetic is pure Python and CPU bound.
    The first invalid scalar aborts the whole batch:
    its exception is re-raised and no partial result is returned.
    """

    scalar_list = list(scalars)
    if not scalar_list:
        return []
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(partial(derive, limb_order=limb_order), scalar_list))


@dataclass(frozen=True)
class KeyRecord(DataClassJsonMixin):
    "Key data in the format expected by the key registration tooling."

    curve: str
    priv_hex: str
    pub_hex: str
    pub_g2_hex: str


@dataclass(frozen=True)
class KeyPair:
    scalar: int
    pub_g1: G1Point
    pub_g2: G2Point
    check_validity: InitVar[bool] = True

    def __post_init__(self, check_validity: bool) -> None:
        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:
        if isinstance(self.scalar, bool) or not isinstance(self.scalar, int):
            raise BN254TypeError(f"not a private key: {self.scalar!r}")
        # Fail if scalar is not [1, n-1]
        pub_g1, pub_g2 = derive_points(self.scalar)

        if self.pub_g1 != pub_g1:
            raise BN254ValueError(f"G1 public key mismatch: {self.pub_g1}")
        if self.pub_g2 != pub_g2:
            raise BN254ValueError(f"G2 public key mismatch: {self.pub_g2}")

    @classmethod
    def from_scalar(cls, scalar: Scalar) -> "KeyPair":
        q = int_from_scalar(scalar)
        pub_g1, pub_g2 = derive_points(q)
        return cls(q, pub_g1, pub_g2, check_validity=False)

    @property
    def priv_bytes(self) -> bytes:
        return self.scalar.to_bytes(bn254.n_size, byteorder="big", signed=False)

    def record(self, limb_order: LimbOrder = LimbOrder.C0_FIRST) -> KeyRecord:
        return KeyRecord(
            curve=bn254.name,
            priv_hex="0x" + self.priv_bytes.hex(),
            pub_hex="0x" + encode_g1(self.pub_g1).hex(),
            pub_g2_hex="0x" + encode_g2(self.pub_g2, limb_order).hex(),
        )
