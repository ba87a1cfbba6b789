#!/usr/bin/env python3

# Copyright (C) 2024-2026 The bn254keygen developers
#
# This file is part of bn254keygen. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bn254keygen including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line tools.

bn254-keygen: derive a BN254 key pair from a scalar
and print it as a key record, coordinates,
and Solidity / KeyRegistrar snippets.

bn254-diagnose: classify a G1 point from an unknown backend.

Both exit with status 1 on any usage or input error.
"""

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from bn254keygen import __version__
from bn254keygen.ecc.curve import bn254
from bn254keygen.ecc.diagnostics import CANDIDATE_B, GeneratorConvention, diagnose
from bn254keygen.ecc.field import LimbOrder
from bn254keygen.ecc.point_codec import g1_coordinates, g2_coordinates
from bn254keygen.exceptions import BN254ValueError
from bn254keygen.key_derivation import KeyPair

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


class _ArgumentParser(argparse.ArgumentParser):
    "ArgumentParser exiting with status 1, instead of 2, on usage errors."

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _keygen_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="bn254-keygen",
        description="Derive a BN254 key pair, generator G1 = (1, 2).",
        epilog=(
            "examples: bn254-keygen 12345 | "
            "bn254-keygen 0x1a2b3c4d5e6f | bn254-keygen 69"
        ),
    )
    parser.add_argument(
        "scalar", help="private key, decimal or 0x-prefixed hex, in 1..n-1"
    )
    parser.add_argument(
        "--limb-order",
        choices=[order.value for order in LimbOrder],
        default=LimbOrder.C0_FIRST.value,
        help="G2 limb order in pub_g2_hex (default: %(default)s)",
    )
    parser.add_argument(
        "--json", action="store_true", help="print the key record only"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def print_key_details(key_pair: KeyPair) -> None:
    "Print coordinates and contract-call snippets for a key pair."

    g1x, g1y = g1_coordinates(key_pair.pub_g1)
    # Solidity BN254.G2Point arrays are [c1, c0]
    g2x, g2y = g2_coordinates(key_pair.pub_g2, LimbOrder.C1_FIRST)

    print("\nKey Details:")
    print(f"Private Key (scalar): {key_pair.scalar}")
    print(f"Private Key (hex): 0x{key_pair.priv_bytes.hex()}")

    print("\n=== G1 Public Key ===")
    print(f"X coordinate: {g1x}")
    print(f"Y coordinate: {g1y}")
    print(f"X coordinate (hex): 0x{g1x:064x}")
    print(f"Y coordinate (hex): 0x{g1y:064x}")

    print("\n=== G2 Public Key ===")
    (x_c0, x_c1), (y_c0, y_c1) = g2_coordinates(key_pair.pub_g2)
    print(f"X.c0 coordinate: {x_c0}")
    print(f"X.c1 coordinate: {x_c1}")
    print(f"Y.c0 coordinate: {y_c0}")
    print(f"Y.c1 coordinate: {y_c1}")
    print(f"X.c0 coordinate (hex): 0x{x_c0:064x}")
    print(f"X.c1 coordinate (hex): 0x{x_c1:064x}")
    print(f"Y.c0 coordinate (hex): 0x{y_c0:064x}")
    print(f"Y.c1 coordinate (hex): 0x{y_c1:064x}")

    print("\n=== Solidity Format (for contracts) ===")
    print("// G1 Point")
    print("BN254.G1Point memory pubkeyG1 = BN254.G1Point({")
    print(f"    X: {g1x},")
    print(f"    Y: {g1y}")
    print("});\n")
    print("// G2 Point")
    print("BN254.G2Point memory pubkeyG2 = BN254.G2Point({")
    print(f"    X: [{g2x[0]}, {g2x[1]}],")
    print(f"    Y: [{g2y[0]}, {g2y[1]}]")
    print("});")

    print("\n=== KeyRegistrar Format ===")
    print("bytes memory keyData = abi.encode(")
    print(f"    {g1x}, // g1X")
    print(f"    {g1y}, // g1Y")
    print(f"    [{g2x[0]}, {g2x[1]}], // g2X")
    print(f"    [{g2y[0]}, {g2y[1]}]  // g2Y")
    print(");")

    G1x, G1y = g1_coordinates(bn254.G1)
    print("\nGenerator Point (matches Solidity BN254.generatorG1()):")
    print(f"Generator: ({G1x}, {G1y})")


def main(argv: Optional[List[str]] = None) -> int:
    args = _keygen_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        key_pair = KeyPair.from_scalar(args.scalar)
    except BN254ValueError as e:
        logger.debug("key derivation failed", exc_info=True)
        print(f"bn254-keygen: error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    record = key_pair.record(LimbOrder(args.limb_order))
    if args.json:
        print(record.to_json(indent=2))
        return 0

    print("Generated BN254 Key:")
    print(record.to_json(indent=2))
    print_key_details(key_pair)
    return 0


def _diagnose_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="bn254-diagnose",
        description="Test a point against candidate curves and base points.",
    )
    parser.add_argument("x", help="x-coordinate, decimal or 0x-prefixed hex")
    parser.add_argument("y", help="y-coordinate, decimal or 0x-prefixed hex")
    parser.add_argument(
        "--convention",
        choices=[convention.value for convention in GeneratorConvention],
        default=GeneratorConvention.STANDARD_BASE_POINT.value,
        help="reference base point (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="print the report only")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def diagnose_main(argv: Optional[List[str]] = None) -> int:
    args = _diagnose_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        report = diagnose(args.x, args.y, GeneratorConvention(args.convention))
    except BN254ValueError as e:
        logger.debug("diagnostics failed", exc_info=True)
        print(f"bn254-diagnose: error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.json:
        print(report.to_json(indent=2))
        return 0

    print(f"Point: ({report.x}, {report.y})")
    print(f"Point hex: (0x{report.x:064x}, 0x{report.y:064x})")
    print("\nCurve equation testing:")
    for b in CANDIDATE_B:
        mark = "ON CURVE" if b in report.curves else "Not on"
        suffix = " (standard BN254)" if b == 3 else ""
        print(f"{mark}: y^2 = x^3 + {b}{suffix}")
    print(f"\nRelationship to the {report.convention.value} base point:")
    print(report.relation.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
