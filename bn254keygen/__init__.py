#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the bn254keygen package."

name = "bn254keygen"
__version__ = "2026.10.0"
__author__ = "The bn254keygen developers"
__author_email__ = "devs@bn254keygen.org"
__copyright__ = "Copyright (C) 2024-2026 The bn254keygen developers"
__license__ = "MIT License"
