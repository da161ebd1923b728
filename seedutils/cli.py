#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CLI seed utilities.

seed-utils child|extend|truncate|xor|xpub|xprv ...

Seeds are BIP39 mnemonic sentences, to be quoted as a single argument.
"""

import argparse
import logging
import sys
from typing import List, Optional

from seedutils import __version__
from seedutils.api import (
    derive_child_seeds,
    derive_root_xprv,
    derive_root_xpub,
    derive_xprvs_from_seed,
    derive_xpubs_from_seed,
    extend_seed,
    truncate_seed,
    xor_seeds,
)
from seedutils.bip32.slip132 import reencode
from seedutils.exceptions import SeedUtilsError, VersionError
from seedutils.mnemonic.bip39 import WordCount
from seedutils.network import Version

LOGGER = logging.getLogger(__name__)

_WORD_COUNTS = [wc.count for wc in WordCount]
_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _non_negative_int(value: str) -> int:
    try:
        i = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if i < 0:
        raise argparse.ArgumentTypeError(f"negative integer: {i}")
    return i


def _add_seed(parser: argparse.ArgumentParser, help_: str) -> None:
    parser.add_argument("seed", help=help_)


def _add_words(
    parser: argparse.ArgumentParser,
    default: int,
    help_: str,
    choices: List[int] = _WORD_COUNTS,
) -> None:
    parser.add_argument(
        "-w", "--words", type=int, choices=choices, default=default, help=help_
    )


def _add_range(parser: argparse.ArgumentParser, what: str) -> None:
    parser.add_argument(
        "-i",
        "--index",
        type=_non_negative_int,
        default=0,
        help=f"index to derive {what} at (default: 0)",
    )
    parser.add_argument(
        "-n",
        "--number",
        type=_non_negative_int,
        default=1,
        help=f"number of {what} to derive, starting from index (default: 1)",
    )


def _add_xkey_subparser(subparsers, kind: str) -> None:

    sub = subparsers.add_parser(kind, help=f"derive account {kind}s from a seed")
    _add_seed(sub, f"seed to derive {kind}s from")
    sub.add_argument(
        "--root",
        "--master",
        action="store_true",
        help=f"derive the root {kind} only",
    )
    _add_range(sub, f"{kind}s")
    # unset range options are told apart from --root in main
    sub.set_defaults(index=None, number=None)
    sub.add_argument(
        "-t",
        "--type",
        default=kind,
        metavar="VERSION",
        help=f"SLIP132 version, e.g. {kind} or z{kind[1:]} (default: {kind})",
    )


def _parser() -> argparse.ArgumentParser:

    parser = argparse.ArgumentParser(prog="seed-utils", description=__doc__)
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log verbosity (-v info, -vv debug)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    child = subparsers.add_parser("child", help="derive BIP85 child seeds from a seed")
    _add_seed(child, "seed to derive child seeds from")
    _add_range(child, "child seeds")
    _add_words(child, 24, "word count of the child seeds (default: 24)")

    extend = subparsers.add_parser(
        "extend",
        help="create a new seed by extending the entropy of a 12 or 18 word seed",
    )
    _add_seed(extend, "seed to extend")
    _add_words(
        extend, 24, "word count of the extended seed (default: 24)", [18, 24]
    )

    truncate = subparsers.add_parser(
        "truncate",
        help="create a new seed by truncating the entropy of another seed; "
        "it begins with the same words, only the last one differs",
    )
    _add_seed(truncate, "seed to truncate")
    _add_words(
        truncate, 12, "word count of the truncated seed (default: 12)", [12, 18]
    )

    xor = subparsers.add_parser("xor", help="xor multiple seeds")
    xor.add_argument(
        "-s",
        "--seed",
        action="append",
        required=True,
        dest="seeds",
        help="seed to xor, to be repeated for each seed",
    )

    _add_xkey_subparser(subparsers, "xpub")
    _add_xkey_subparser(subparsers, "xprv")

    return parser


def _child(args: argparse.Namespace) -> None:
    word_count = WordCount.from_count(args.words)
    end = args.index + args.number
    for i, mnemonic in derive_child_seeds(args.seed, args.index, end, word_count):
        print(f"Derived seed at {i}: {mnemonic}")


def _extend(args: argparse.Namespace) -> None:
    extended = extend_seed(args.seed, WordCount.from_count(args.words))
    print(f"Extended seed: {extended}")


def _truncate(args: argparse.Namespace) -> None:
    truncated = truncate_seed(args.seed, WordCount.from_count(args.words))
    print(f"Truncated seed: {truncated}")


def _xor(args: argparse.Namespace) -> None:
    print(f"XORed seed: {xor_seeds(args.seeds)}")


def _xkeys(args: argparse.Namespace) -> None:

    kind = args.command
    version = Version.from_name(args.type)
    if version.is_private != (kind == "xprv"):
        raise VersionError(f"not a {kind} version: {version.label}")

    if args.root:
        root_fn = derive_root_xprv if version.is_private else derive_root_xpub
        root = root_fn(args.seed, network=version.network)
        print(f"Root {kind}: {reencode(root.b58encode(), version)}")
        return

    derive_fn = derive_xprvs_from_seed if version.is_private else derive_xpubs_from_seed
    end = args.index + args.number
    for der_path, xkey in derive_fn(args.seed, args.index, end, version):
        print(f"Derived {kind} at {der_path}: {reencode(xkey.b58encode(), version)}")


_COMMANDS = {
    "child": _child,
    "extend": _extend,
    "truncate": _truncate,
    "xor": _xor,
    "xpub": _xkeys,
    "xprv": _xkeys,
}


def main(argv: Optional[List[str]] = None) -> int:
    "Run the seed-utils command line, returning the exit status."

    parser = _parser()
    args = parser.parse_args(argv)

    if args.command == "xor" and len(args.seeds) < 2:
        parser.error("xor requires at least two seeds")
    if args.command in ("xpub", "xprv"):
        given = args.index is not None or args.number is not None
        if args.root and given:
            parser.error("--root cannot be used with -i/--index or -n/--number")
        args.index = 0 if args.index is None else args.index
        args.number = 1 if args.number is None else args.number

    level = _LOG_LEVELS[min(args.verbose, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    LOGGER.info("running %s", args.command)

    try:
        _COMMANDS[args.command](args)
    except SeedUtilsError as e:
        LOGGER.debug("%s failed", args.command, exc_info=True)
        print(f"seed-utils: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
