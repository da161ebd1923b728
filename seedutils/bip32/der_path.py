#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A derivation path is a list of integer indexes,
an index greater than or equal to 2^31 being hardened.
It can be expressed as:

- "m/84h/0'/1H/0/10" or "84h/0'/1H/0/10" string
- sequence of integer indexes (even a single int)
- bytes (multiples of 4-bytes little-endian index)
"""

from typing import List, Sequence, Union

from seedutils.exceptions import Bip32Error

HARDENED = 0x80000000

# default hardening symbol among the possible ones: "h", "H", "'"
_HARDENING = "h"
_HARDENING_SYMBOLS = ("'", "h", "H")

BIP32DerPath = Union[str, Sequence[int], int, bytes]


def int_from_index_str(s: str) -> int:
    "Return the integer index of a path step, e.g. 84 for '84' or 2^31+84 for \"84'\"."

    s = s.strip()
    hardened = s[-1:] in _HARDENING_SYMBOLS
    if hardened:
        s = s[:-1]

    try:
        index = int(s)
    except ValueError:
        raise Bip32Error(f"invalid index: {s!r}") from None
    if not 0 <= index < HARDENED:
        raise Bip32Error(f"invalid index: {index}")
    return index + (HARDENED if hardened else 0)


def str_from_index_int(i: int, hardening: str = _HARDENING) -> str:

    if hardening not in _HARDENING_SYMBOLS:
        raise Bip32Error(f"invalid hardening symbol: {hardening}")
    if not 0 <= i <= 0xFFFFFFFF:
        raise Bip32Error(f"invalid index: {i}")
    if i < HARDENED:
        return str(i)
    return str(i - HARDENED) + hardening


def _indexes_from_bip32_path_str(der_path: str) -> List[int]:

    steps = [x.strip() for x in der_path.split("/")]
    if steps[0] in ("m", "M"):
        steps = steps[1:]

    indexes = [int_from_index_str(s) for s in steps if s != ""]

    if len(indexes) > 255:
        raise Bip32Error(f"depth greater than 255: {len(indexes)}")
    return indexes


def indexes_from_bip32_path(der_path: BIP32DerPath) -> List[int]:

    if isinstance(der_path, str):
        return _indexes_from_bip32_path_str(der_path)

    if isinstance(der_path, int):
        indexes = [der_path]
    elif isinstance(der_path, bytes):
        if len(der_path) % 4 != 0:
            err_msg = f"index are not a multiple of 4-bytes: {len(der_path)}"
            raise Bip32Error(err_msg)
        indexes = [
            int.from_bytes(der_path[n : n + 4], byteorder="little", signed=False)
            for n in range(0, len(der_path), 4)
        ]
    else:
        # Iterable[int]
        indexes = [int(i) for i in der_path]

    for i in indexes:
        if not 0 <= i <= 0xFFFFFFFF:
            raise Bip32Error(f"invalid index: {i}")
    return indexes


def str_from_bip32_path(der_path: BIP32DerPath, hardening: str = _HARDENING) -> str:
    "Return the 'm/...' string representation of the derivation path."

    indexes = indexes_from_bip32_path(der_path)
    steps = [str_from_index_int(i, hardening) for i in indexes]
    return "/".join(["m"] + steps)


def bytes_from_bip32_path(der_path: BIP32DerPath) -> bytes:
    indexes = indexes_from_bip32_path(der_path)
    result = [i.to_bytes(4, byteorder="little", signed=False) for i in indexes]
    return b"".join(result)
