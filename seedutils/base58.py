#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Base58Check encoding and decoding functions.

Base58 omits the similar-looking characters
0 (zero), O (capital o), I (capital i), and l (lower case L),
together with '+' and '/', so that a printed key is not ambiguous
and a double-click does select the whole string.

Base58Check is the checksummed version of Base58, using
hash256(v)[:4] as checksum suffix before encoding;
at the decoding stage the checksum validity ensures data integrity.

BIP32 extended keys are the only Base58Check payloads
in this package: 78 bytes, with the leading 4-byte version
selecting the familiar xprv/xpub/zpub/... prefix.

Decoding errors are reported as Bip32Error.
"""

from typing import Optional

from seedutils.alias import Octets, String
from seedutils.exceptions import Bip32Error
from seedutils.hashes import hash256
from seedutils.utils import bytes_from_octets

_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE = len(_ALPHABET)
_CHECKSUM_SIZE = 4


def _b58encode(v: bytes) -> bytes:

    # leading-0s become base58 leading-1s
    stripped = v.lstrip(b"\0")
    result = _ALPHABET[:1] * (len(v) - len(stripped))

    i = int.from_bytes(stripped, byteorder="big", signed=False)
    digits = b""
    while i:
        i, idx = divmod(i, _BASE)
        digits = _ALPHABET[idx : idx + 1] + digits
    return result + digits


def _b58decode(v: bytes) -> bytes:

    if any(x not in _ALPHABET for x in v):
        raise Bip32Error("Base58 string contains invalid characters")

    # base58 leading-1s become leading-0s
    stripped = v.lstrip(_ALPHABET[:1])
    result = b"\0" * (len(v) - len(stripped))

    i = 0
    for char in stripped:
        i = i * _BASE + _ALPHABET.index(char)
    if stripped:
        nbytes = (i.bit_length() + 7) // 8
        result += i.to_bytes(nbytes, byteorder="big", signed=False)
    return result


def b58encode(v: Octets, in_size: Optional[int] = None) -> bytes:
    """Encode a bytes-like object using Base58Check."""

    v = bytes_from_octets(v, in_size)
    checksum = hash256(v)[:_CHECKSUM_SIZE]
    return _b58encode(v + checksum)


def b58decode(v: String, out_size: Optional[int] = None) -> bytes:
    """Decode a Base58Check encoded bytes-like object or ASCII string.

    Optionally, it also ensures required output size.
    """

    if isinstance(v, str):
        try:
            v = v.encode("ascii")
        except UnicodeEncodeError as e:
            raise Bip32Error("Base58 string contains non-ascii characters") from e

    result = _b58decode(v)
    if len(result) < _CHECKSUM_SIZE:
        err_msg = "not enough bytes for checksum, "
        err_msg += f"invalid base58 decoded size: {len(result)}"
        raise Bip32Error(err_msg)

    result, checksum = result[:-_CHECKSUM_SIZE], result[-_CHECKSUM_SIZE:]
    h256 = hash256(result)
    if checksum != h256[:_CHECKSUM_SIZE]:
        err_msg = f"invalid checksum: 0x{checksum.hex()} instead of 0x{h256[:4].hex()}"
        raise Bip32Error(err_msg)

    if out_size is None or len(result) == out_size:
        return result

    err_msg = "valid checksum, invalid decoded size: "
    err_msg += f"{len(result)} bytes instead of {out_size}"
    raise Bip32Error(err_msg)
