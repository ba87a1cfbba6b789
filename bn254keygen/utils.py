#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

All byte encodings are big-endian and fixed-size,
as expected by the EVM BN254 precompiles (EIP-196, EIP-197).
"""

from collections.abc import Iterable as IterableCollection
from string import hexdigits
from typing import Iterable, Optional, Union

from bn254keygen.alias import Integer, Octets
from bn254keygen.exceptions import InvalidEncoding

HEX_THRESHOLD = 0xFFFFFFFF

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    An optional 0x prefix is accepted for hex-strings.
    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        octets = octets.strip()
        if octets[:2].lower() == "0x":
            octets = octets[2:]
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise InvalidEncoding(f"not a hex-string: {octets!r}") from e

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise InvalidEncoding(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "3735928559"
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * b'\xde\xad\xbe\xef'

    Strings without the 0x prefix are decimal,
    as on the command line of the key generation tools.
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        try:
            if not i.isascii():
                raise ValueError
            digits = i[1:] if i.startswith("-") else i
            if digits.startswith("0x"):
                if not digits[2:] or not all(c in hexdigits for c in digits[2:]):
                    raise ValueError
                return int(i, 16)
            if not digits.isdigit():
                raise ValueError
            return int(i, 10)
        except ValueError as e:
            raise InvalidEncoding(f"not a decimal or 0x-hex integer: {i!r}") from e

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise InvalidEncoding(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def int_string(i: int) -> str:
    "Return i in decimal if small, as a grouped hex-string otherwise."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
