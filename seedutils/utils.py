#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities."""

from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from seedutils.alias import Integer, Octets
from seedutils.exceptions import SeedUtilsValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string or bytes-like object.

    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise SeedUtilsValueError(f"invalid hex-string: {octets!r}") from e
    else:
        octets = bytes(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise SeedUtilsValueError(err_msg)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * "0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, byteorder="big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise SeedUtilsValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    return " ".join(lresult).upper()


def xor_bytes(a: bytes, b: bytes) -> bytes:
    "Return the byte-wise exclusive-or of two same-length byte sequences."

    if len(a) != len(b):
        raise SeedUtilsValueError(f"length mismatch: {len(a)} vs {len(b)} bytes")
    return bytes(x ^ y for x, y in zip(a, b))
