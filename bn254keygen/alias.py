#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "0000000000000000000000000000000000000000000000000000000000000001"
# "00000000 00000000 00000000 00000000 00000000 00000000 00000000 00000002"
#
# use bn254keygen.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for serialized G1 points (64 bytes),
# serialized G2 points (128 bytes), field elements (32 bytes)
Octets = Union[bytes, str]

# Integer representations accepted by bn254keygen.utils.int_from_integer:
# native int, big-endian bytes,
# decimal string ("12345") or 0x-prefixed hex-string ("0x3039")
Integer = Union[bytes, str, int]

# Affine coordinates as plain integers, as they appear in reports
# and in Solidity struct literals; (0, 0) stands for the identity
IntPoint = Tuple[int, int]

# G2 coordinates as plain integers, each one a (first limb, second limb) pair
# in the limb order requested by the caller
IntPoint2 = Tuple[Tuple[int, int], Tuple[int, int]]
