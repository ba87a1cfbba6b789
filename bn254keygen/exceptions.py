#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

BN254ValueError and BN254TypeError are only meant to discriminate
between Exceptions being raised by bn254keygen from those raised by
other codebase.

The remaining classes name the failure kinds of the key derivation
and point encoding layer; they all derive from BN254ValueError,
so users are usually better off just dealing with the regular
ValueError and TypeError from which the bn254keygen versions are derived.
"""


class BN254ValueError(ValueError):
    pass


class BN254TypeError(TypeError):
    pass


class InvalidEncoding(BN254ValueError):
    "Wrong byte length, malformed number string, or value outside its modulus."


class ScalarOutOfRange(BN254ValueError):
    "Private scalar not in 1..r-1."


class PointNotOnCurve(BN254ValueError):
    "Coordinates do not satisfy the curve equation."


class ArithmeticDomainError(BN254ValueError):
    "Operation not defined for its input (e.g. inverse of zero)."
