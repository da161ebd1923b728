#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed point representation.

BIP32 only uses the 33 bytes compressed form (0x02, 0x03 prefix),
according to SEC 1 v.2, section 2.3.3 and 2.3.4.
"""

from seedutils.alias import Octets, Point
from seedutils.ecc.curve import Curve, secp256k1
from seedutils.exceptions import SeedUtilsValueError
from seedutils.utils import bytes_from_octets, hex_string


def bytes_from_point(Q: Point, ec: Curve = secp256k1) -> bytes:
    "Return a point as compressed octet sequence."

    ec.require_on_curve(Q)
    if Q[1] == 0:  # infinity point in affine coordinates
        raise SeedUtilsValueError("no bytes representation for infinity point")

    prefix = b"\x03" if (Q[1] & 1) else b"\x02"
    return prefix + Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    "Return the curve point (x_Q, y_Q) of a compressed public key."

    pub_key = bytes_from_octets(pub_key, ec.p_size + 1)
    if pub_key[0] not in (0x02, 0x03):
        raise SeedUtilsValueError(f"not a compressed point: {pub_key.hex()}")

    x_Q = int.from_bytes(pub_key[1:], byteorder="big", signed=False)
    try:
        y_Q = ec.y_even(x_Q)  # also check x_Q validity
    except SeedUtilsValueError as e:
        raise SeedUtilsValueError(f"invalid x-coordinate: '{hex_string(x_Q)}'") from e
    return x_Q, y_Q if pub_key[0] == 0x02 else ec.p - y_Q
