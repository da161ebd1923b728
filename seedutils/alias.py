#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "000102030405060708090a0b0c0d0e0f"
# "0488 ade4"
#
# use seedutils.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for seeds, entropy, chain codes,
# BIP32 version (4 bytes), fingerprints (4 bytes), etc.
Octets = Union[bytes, str]

# bytes or 'ascii' text string (not hex-string)
#
# used for base58 strings like BIP32 keys:
# "xprv9s21ZrQH143K3QTDL4LXw2F7HEK3wJUD2nW2nRk4stbPy6cq3jPPqjiChkVvvNKmPGJxWUtg6LnF5kejMRNNU3TGtRBeJgk33yuGBxrMPHi"
#
# leading/trailing blanks should always be stripped
#     if isinstance(xkey, str):
#         xkey = xkey.strip()
String = Union[bytes, str]

# hex-string or bytes representation of an int
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates.
Point = Tuple[int, int]

# The infinity point in affine coordinates is INF = (int, 0)
# (no affine point has y=0 coordinate in a group of prime order).
# It can be checked with 'INF[1] == 0'
# 5 is not a valid x-coordinate in secp256k1
INF = 5, 0

# Elliptic curve point in Jacobian coordinates.
JacPoint = Tuple[int, int, int]

# Infinity point in Jacobian coordinates is INFJ = (int, int, 0).
# It can be checked with 'INFJ[2] == 0'
INFJ = 7, 0, 0
