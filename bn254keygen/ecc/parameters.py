#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BN254 (alt_bn128) domain parameters.

The parameters are the ones of the EVM precompiles
(EIP-196, EIP-197), of gnark-crypto, and of py_ecc:

* p: base field prime
* n: prime order of both G1 and the G2 subgroup (a.k.a. r)
* b: G1 curve is y^2 = x^3 + b
* xi: 9 + u, the G2 twist is y^2 = x^3 + b / xi over Fp2 = Fp[u]/(u^2 + 1)
* g1, g2: generators, g2 limbs stored as (c0, c1)

They are loaded once, at import time, from the package data file
and are read-only afterwards.
"""

import json
from dataclasses import dataclass, field
from os import path
from typing import Any, Dict, Sequence, Tuple

from dataclasses_json import DataClassJsonMixin, config

from bn254keygen.exceptions import BN254ValueError

datadir = path.join(path.dirname(__file__), "data")


def _int_from_hex(hex_: str) -> int:
    return int(hex_, 16)


def _hex_pair(pair: Sequence[int]) -> Tuple[str, str]:
    return hex(pair[0]), hex(pair[1])


def _int_pair(pair: Sequence[str]) -> Tuple[int, int]:
    if len(pair) != 2:
        raise BN254ValueError(f"not a pair: {pair}")
    return _int_from_hex(pair[0]), _int_from_hex(pair[1])


_HEX = config(encoder=hex, decoder=_int_from_hex)
_HEX_PAIR = config(encoder=_hex_pair, decoder=_int_pair)


@dataclass(frozen=True)
class CurveParameters(DataClassJsonMixin):
    name: str
    p: int = field(metadata=_HEX)
    n: int = field(metadata=_HEX)
    b: int = field(metadata=_HEX)
    xi: Tuple[int, int] = field(metadata=_HEX_PAIR)
    g1: Tuple[int, int] = field(metadata=_HEX_PAIR)
    g2: Tuple[Tuple[int, int], Tuple[int, int]] = field(
        metadata=config(
            encoder=lambda v: [_hex_pair(v[0]), _hex_pair(v[1])],
            decoder=lambda v: (_int_pair(v[0]), _int_pair(v[1])),
        )
    )
    cofactor: int = 1
    embedding_degree: int = 12


def load_parameters(filename: str) -> CurveParameters:
    "Return the curve parameters stored in a json file."

    with open(filename, "r", encoding="ascii") as file_:
        dict_: Dict[str, Any] = json.load(file_)
    return CurveParameters.from_dict(dict_)


BN254_PARAMETERS = load_parameters(path.join(datadir, "bn254.json"))
