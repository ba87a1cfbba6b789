#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Module bn254keygen.ecc."
