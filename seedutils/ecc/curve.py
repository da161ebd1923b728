#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""The secp256k1 elliptic curve group.

Points are tuples of integers: affine (x, y) at the interface,
Jacobian (X, Y, Z) internally for scalar multiplication.

https://www.secg.org/sec2-v2.pdf
"""

from math import ceil
from typing import Optional

from seedutils.alias import INF, INFJ, JacPoint, Point
from seedutils.ecc.number_theory import mod_inv, mod_sqrt
from seedutils.exceptions import SeedUtilsValueError
from seedutils.utils import hex_string


def jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1 if Q[1] else 0


class Curve:
    """Elliptic curve y^2 = x^3 + a*x + b over Fp, with generator G of order n.

    Parameters are not validated: only well known curves
    are instantiated in this package.
    """

    def __init__(self, p: int, a: int, b: int, G: Point, n: int, h: int = 1) -> None:
        self.p = p
        self._a = a
        self._b = b
        self.p_size = ceil(p.bit_length() / 8)
        self.G = G
        self.GJ = jac_from_aff(G)
        self.n = n
        self.n_size = ceil(n.bit_length() / 8)
        self.h = h

    def __repr__(self) -> str:
        return (
            f"Curve('{hex_string(self.p)}', {self._a}, {self._b}, "
            f"('{hex_string(self.G[0])}', '{hex_string(self.G[1])}'), "
            f"'{hex_string(self.n)}', {self.h})"
        )

    def aff_from_jac(self, Q: JacPoint) -> Point:
        # point is assumed to be on curve
        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return INF

        Z2 = Q[2] * Q[2]
        x = Q[0] * mod_inv(Z2, self.p)
        y = Q[1] * mod_inv(Z2 * Q[2], self.p)
        return x % self.p, y % self.p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if R[1] == 0:  # Infinity point in affine coordinates
            return Q
        if Q[1] == 0:  # Infinity point in affine coordinates
            return R

        if R[0] == Q[0]:
            if R[1] == Q[1]:  # point doubling
                lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
            else:  # opposite points
                return INF
        else:
            lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_jac(self, Q: JacPoint) -> JacPoint:
        # point is assumed to be on curve

        QZ2 = Q[2] * Q[2]
        QY2 = Q[1] * Q[1]
        W = 3 * Q[0] * Q[0] + self._a * QZ2 * QZ2
        V = 4 * Q[0] * QY2
        X = W * W - 2 * V
        Y = W * (V - X) - 8 * QY2 * QY2
        Z = 2 * Q[1] * Q[2]
        return X % self.p, Y % self.p, Z % self.p

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # points are assumed to be on curve

        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return R
        if R[2] == 0:  # Infinity point in Jacobian coordinates
            return Q

        RZ2 = R[2] * R[2]
        RZ3 = RZ2 * R[2]
        QZ2 = Q[2] * Q[2]
        QZ3 = QZ2 * Q[2]

        M = Q[0] * RZ2
        N = R[0] * QZ2
        T = Q[1] * RZ3
        U = R[1] * QZ3

        if M % self.p == N % self.p:  # same affine x
            if T % self.p == U % self.p:  # point doubling
                return self.double_jac(Q)
            return INFJ  # opposite points

        W = U - T
        V = N - M

        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2

        X = (W * W - V3 - 2 * MV2) % self.p
        Y = (W * (MV2 - X) - T * V3) % self.p
        Z = (V * Q[2] * R[2]) % self.p
        return X, Y, Z

    def _y2(self, x: int) -> int:
        # if sqrt(y*y) does not exist, then x is not valid
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise SeedUtilsValueError(f"x-coordinate not in 0..p-1: {hex_string(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except SeedUtilsValueError as e:
            raise SeedUtilsValueError(f"invalid x-coordinate: {hex_string(x)}") from e

    def y_even(self, x: int) -> int:
        """Return the even affine y-coordinate associated to x."""
        root = self.y(x)
        return self.p - root if root % 2 else root

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise SeedUtilsValueError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 < Q[1] < self.p:  # y cannot be zero
            raise SeedUtilsValueError(f"y-coordinate not in 1..p-1: {hex_string(Q[1])}")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise SeedUtilsValueError("point not on curve")


def mult_jac(m: int, Q: JacPoint, ec: Curve) -> JacPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    Jacobian coordinates.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n.
    """

    if m < 0:
        raise SeedUtilsValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INFJ, Q]
    R[0] = R[m & 1]
    m >>= 1
    while m > 0:
        Q = ec.double_jac(Q)
        # always perform the 'add', even if useless, to be constant-time
        R[1] = ec.add_jac(R[0], Q)
        R[0] = R[m & 1]
        m >>= 1
    return R[0]


secp256k1 = Curve(
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    a=0,
    b=7,
    G=(
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
)


def mult(m: int, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Elliptic curve scalar multiplication, G being the default point."""

    if Q is None:
        QJ = ec.GJ
    else:
        ec.require_on_curve(Q)
        QJ = jac_from_aff(Q)
    m %= ec.n
    return ec.aff_from_jac(mult_jac(m, QJ, ec))
