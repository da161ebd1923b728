#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

Only what is needed by the secp256k1 group law:
modular inverse (extended Euclidean algorithm)
and modular square root for primes p = 3 mod 4.
"""

from typing import Tuple

from seedutils.exceptions import SeedUtilsValueError
from seedutils.utils import hex_string


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a (mod m). m does not have to be a prime."

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise SeedUtilsValueError(f"no inverse for {hex_string(a)} mod {hex_string(m)}")


def mod_sqrt(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a; p must be a 3 mod 4 prime.

    Solve the equation:
        x^2 = a mod p

    and return x. Note that p - x is also a root.
    """

    if p % 4 != 3:
        raise SeedUtilsValueError(f"prime is not 3 mod 4: {hex_string(p)}")

    a %= p
    # root candidate is pow(a, (p + 1) // 4, p)
    r = pow(a, (p >> 2) + 1, p)
    if r * r % p != a:
        raise SeedUtilsValueError(f"no root for {hex_string(a)} mod {hex_string(p)}")
    return r
