#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 Hierarchical Deterministic Wallet functions.

A hierarchical deterministic wallet is a tree of private/public key pairs,
derived from a single root (the master key) which in turn is derived from
a seed, e.g. the BIP39 seed of a mnemonic.

Here, the HD wallet is implemented according to BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki.

A BIP32 extended key is 78 bytes:

- [  : 4] version
- [ 4: 5] depth in the derivation path
- [ 5: 9] parent fingerprint
- [ 9:13] index
- [13:45] chain code
- [45:78] compressed pub_key or [0x00][prv_key]

Derivation never modifies its input:
each derived key is a new BIP32KeyData.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import reduce
from typing import List, Optional, Tuple, Type, Union

from seedutils import base58
from seedutils.alias import Octets, String
from seedutils.bip32.der_path import HARDENED, BIP32DerPath, indexes_from_bip32_path
from seedutils.ecc.curve import mult, secp256k1
from seedutils.ecc.sec_point import bytes_from_point, point_from_octets
from seedutils.exceptions import Bip32Error, SeedUtilsValueError, VersionError
from seedutils.hashes import hash160, hmac_sha512
from seedutils.network import XPRV_VERSIONS_ALL, XPUB_VERSIONS_ALL, Version
from seedutils.utils import bytes_from_octets, hex_string

LOGGER = logging.getLogger(__name__)

ec = secp256k1

_KEY_SIZE: List[Tuple[str, int]] = [
    ("version", 4),
    ("parent_fingerprint", 4),
    ("chain_code", 32),
    ("key", 33),
]
_REQUIRED_LENGTH = 78
_MAX_DEPTH = 255

BIP32Version = Union[Version, Octets]


def _version_prefix(version: BIP32Version) -> bytes:
    if isinstance(version, Version):
        return version.prefix
    try:
        return bytes_from_octets(version, 4)
    except SeedUtilsValueError as e:
        raise Bip32Error(f"invalid version: {version!r}") from e


@dataclass
class BIP32KeyData:
    version: bytes
    depth: int
    parent_fingerprint: bytes
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int
    chain_code: bytes
    key: bytes

    @property
    def is_private(self) -> bool:
        return self.key[0] == 0

    @property
    def is_hardened(self) -> bool:
        return self.index >= HARDENED

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.index == 0
            and self.parent_fingerprint == b"\x00" * 4
        )

    @property
    def slip132_version(self) -> Version:
        return Version.from_prefix(self.version)

    def __init__(
        self,
        version: BIP32Version,
        depth: int,
        parent_fingerprint: Octets,
        index: int,
        chain_code: Octets,
        key: Octets,
        check_validity: bool = True,
    ) -> None:

        self.version = _version_prefix(version)
        self.depth = depth
        self.parent_fingerprint = bytes_from_octets(parent_fingerprint)
        self.index = index
        self.chain_code = bytes_from_octets(chain_code)
        self.key = bytes_from_octets(key)

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = bytes(getattr(self, key))
            setattr(self, key, value)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise Bip32Error(err_msg)

        self.index = int(self.index)
        if not 0 <= self.index <= 0xFFFFFFFF:
            raise Bip32Error(f"invalid index: {self.index}")

        self.depth = int(self.depth)
        if not 0 <= self.depth <= _MAX_DEPTH:
            raise Bip32Error(f"invalid depth: {self.depth}")

        if self.depth == 0:
            if self.parent_fingerprint != b"\x00" * 4:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise Bip32Error(err_msg)
            if self.index != 0:
                raise Bip32Error(f"zero depth with non-zero index: {self.index}")

        if self.version in XPRV_VERSIONS_ALL:
            if self.key[0] != 0:
                raise Bip32Error(f"invalid private key prefix: 0x{self.key[:1].hex()}")
            q = int.from_bytes(self.key[1:], byteorder="big", signed=False)
            if not 0 < q < ec.n:
                raise Bip32Error(f"invalid private key not in 1..n-1: {hex(q)}")
        elif self.version in XPUB_VERSIONS_ALL:
            if self.key[0] not in (2, 3):
                err_msg = "invalid public key prefix not in (0x02, 0x03): "
                err_msg += f"0x{self.key[:1].hex()}"
                raise Bip32Error(err_msg)
            try:
                point_from_octets(self.key, ec)
            except SeedUtilsValueError as e:
                raise Bip32Error(f"invalid public key: 0x{self.key.hex()}") from e
        else:
            raise Bip32Error(f"unknown extended key version: 0x{self.version.hex()}")

    def serialize(self, check_validity: bool = True) -> bytes:

        if check_validity:
            self.assert_valid()

        return b"".join(
            [
                self.version,
                self.depth.to_bytes(1, byteorder="big", signed=False),
                self.parent_fingerprint,
                self.index.to_bytes(4, byteorder="big", signed=False),
                self.chain_code,
                self.key,
            ]
        )

    def b58encode(self, check_validity: bool = True) -> str:
        data_binary = self.serialize(check_validity)
        return base58.b58encode(data_binary).decode("ascii")

    @classmethod
    def parse(
        cls: Type["BIP32KeyData"], xkey_bin: Octets, check_validity: bool = True
    ) -> "BIP32KeyData":
        "Return a BIP32KeyData by parsing 78 bytes."

        xkey_bin = bytes_from_octets(xkey_bin)
        if len(xkey_bin) != _REQUIRED_LENGTH:
            err_msg = f"invalid decoded length: {len(xkey_bin)}"
            err_msg += f" instead of {_REQUIRED_LENGTH}"
            raise Bip32Error(err_msg)

        return cls(
            version=xkey_bin[0:4],
            depth=xkey_bin[4],
            parent_fingerprint=xkey_bin[5:9],
            index=int.from_bytes(xkey_bin[9:13], byteorder="big", signed=False),
            chain_code=xkey_bin[13:45],
            key=xkey_bin[45:78],
            check_validity=check_validity,
        )

    @classmethod
    def b58decode(
        cls: Type["BIP32KeyData"], address: String, check_validity: bool = True
    ) -> "BIP32KeyData":

        if isinstance(address, str):
            address = address.strip()

        xkey_bin = base58.b58decode(address)
        return cls.parse(xkey_bin, check_validity)


BIP32Key = Union[BIP32KeyData, String]


def _xkey(xkey: BIP32Key) -> BIP32KeyData:
    if isinstance(xkey, BIP32KeyData):
        return xkey
    return BIP32KeyData.b58decode(xkey)


def master_key(seed: Octets, version: BIP32Version = Version.XPRV) -> BIP32KeyData:
    """Return BIP32 root master extended private key from seed."""

    seed = bytes_from_octets(seed)
    bitlength = len(seed) * 8
    if bitlength < 128:
        raise Bip32Error(f"too few bits for seed: {bitlength}")
    if bitlength > 512:
        raise Bip32Error(f"too many bits for seed: {bitlength}")

    v = _version_prefix(version)
    if v not in XPRV_VERSIONS_ALL:
        raise Bip32Error(f"not a private key version: {hex_string(v)}")

    hmac_ = hmac_sha512(b"Bitcoin seed", seed)
    q = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    if not 0 < q < ec.n:
        raise Bip32Error("invalid master key, try another seed")

    return BIP32KeyData(
        version=v,
        depth=0,
        parent_fingerprint=b"\x00" * 4,
        index=0,
        chain_code=hmac_[32:],
        key=b"\x00" + hmac_[:32],
    )


def rootxprv_from_seed(seed: Octets, version: BIP32Version = Version.XPRV) -> str:
    """Return BIP32 root master extended private key from seed."""
    return master_key(seed, version).b58encode()


def _xpub_from_xprv(xprv: BIP32Key) -> BIP32KeyData:
    """Neutered Derivation (ND).

    Derivation of the extended public key corresponding to an extended
    private key (“neutered” as it removes the ability to sign transactions).
    """

    xkey = _xkey(xprv)
    if not xkey.is_private:
        raise Bip32Error(f"not a private key: {xkey.b58encode()}")

    i = XPRV_VERSIONS_ALL.index(xkey.version)
    q = int.from_bytes(xkey.key[1:], byteorder="big", signed=False)
    return BIP32KeyData(
        version=XPUB_VERSIONS_ALL[i],
        depth=xkey.depth,
        parent_fingerprint=xkey.parent_fingerprint,
        index=xkey.index,
        chain_code=xkey.chain_code,
        key=bytes_from_point(mult(q)),
    )


def xpub_from_xprv(xprv: BIP32Key) -> str:
    """Neutered Derivation (ND).

    Derivation of the extended public key corresponding to an extended
    private key (“neutered” as it removes the ability to sign transactions).
    """
    return _xpub_from_xprv(xprv).b58encode()


def _check_child(parent: BIP32KeyData, index: int) -> None:

    if not 0 <= index <= 0xFFFFFFFF:
        raise Bip32Error(f"invalid index: {index}")
    if parent.depth >= _MAX_DEPTH:
        raise Bip32Error(f"depth greater than {_MAX_DEPTH}: {parent.depth + 1}")


def _ser32(index: int) -> bytes:
    return index.to_bytes(4, byteorder="big", signed=False)


def derive_pub_child(parent: BIP32Key, index: int) -> BIP32KeyData:
    """Public parent key to public child key derivation.

    Only normal (non-hardened) indexes can be derived.
    """

    parent = _xkey(parent)
    if parent.is_private:
        raise Bip32Error("not a public key: use derive_child for private keys")
    _check_child(parent, index)
    if index >= HARDENED:
        raise Bip32Error("invalid hardened derivation from public key")

    hmac_ = hmac_sha512(parent.chain_code, parent.key + _ser32(index))
    offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    if offset >= ec.n:
        raise Bip32Error(f"invalid child key at index {index}: IL not in 0..n-1")
    Q = ec.add(point_from_octets(parent.key, ec), mult(offset))
    if Q[1] == 0:
        raise Bip32Error(f"invalid child key at index {index}: infinity point")

    return BIP32KeyData(
        version=parent.version,
        depth=parent.depth + 1,
        parent_fingerprint=hash160(parent.key)[:4],
        index=index,
        chain_code=hmac_[32:],
        key=bytes_from_point(Q),
    )


def derive_child(parent: BIP32Key, index: int) -> BIP32KeyData:
    """Parent key to child key derivation.

    Private parents derive private children, using hardened derivation
    for indexes greater than or equal to 2^31;
    public parents derive public children (normal derivation only).
    """

    parent = _xkey(parent)
    if not parent.is_private:
        return derive_pub_child(parent, index)
    _check_child(parent, index)

    q = int.from_bytes(parent.key[1:], byteorder="big", signed=False)
    Q_bytes = bytes_from_point(mult(q))
    if index >= HARDENED:
        hmac_ = hmac_sha512(parent.chain_code, parent.key + _ser32(index))
    else:
        hmac_ = hmac_sha512(parent.chain_code, Q_bytes + _ser32(index))
    offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    if offset >= ec.n:
        raise Bip32Error(f"invalid child key at index {index}: IL not in 0..n-1")
    q = (q + offset) % ec.n
    if q == 0:
        raise Bip32Error(f"invalid child key at index {index}: zero private key")

    return BIP32KeyData(
        version=parent.version,
        depth=parent.depth + 1,
        parent_fingerprint=hash160(Q_bytes)[:4],
        index=index,
        chain_code=hmac_[32:],
        key=b"\x00" + q.to_bytes(32, byteorder="big", signed=False),
    )


def derive_path(xkey: BIP32Key, der_path: BIP32DerPath) -> BIP32KeyData:
    "Derive a BIP32 key across a path spanning multiple depth levels."

    xkey = _xkey(xkey)
    indexes = indexes_from_bip32_path(der_path)

    final_depth = xkey.depth + len(indexes)
    if final_depth > _MAX_DEPTH:
        raise Bip32Error(f"final depth greater than {_MAX_DEPTH}: {final_depth}")

    LOGGER.debug("deriving %d levels from depth %d", len(indexes), xkey.depth)
    return reduce(derive_child, indexes, xkey)


def _force_version(xkey: BIP32KeyData, forced_version: BIP32Version) -> BIP32KeyData:

    allowed = XPRV_VERSIONS_ALL if xkey.is_private else XPUB_VERSIONS_ALL
    fversion = _version_prefix(forced_version)
    if fversion not in allowed:
        err_msg = "invalid version forced on the extended key: "
        err_msg += f"{hex_string(fversion)}"
        raise VersionError(err_msg)
    return BIP32KeyData(
        version=fversion,
        depth=xkey.depth,
        parent_fingerprint=xkey.parent_fingerprint,
        index=xkey.index,
        chain_code=xkey.chain_code,
        key=xkey.key,
    )


def derive(
    xkey: BIP32Key,
    der_path: BIP32DerPath,
    forced_version: Optional[BIP32Version] = None,
) -> str:
    """Derive a BIP32 key across a path spanning multiple depth levels.

    Valid BIP32DerPath examples:

    - string like "m/44h/0'/1H/0/10"
    - iterable integer indexes
    - one single integer index
    - bytes in multiples of the 4-bytes index

    BIP32DerPath is blank/extra-slash insensitive
    (e.g. "M /44h / 0' /1H // 0/ 10 / ").

    The optional forced version must be of the same (private or public)
    kind of the derived key, e.g. zprv for a private key.
    """
    derived = derive_path(xkey, der_path)
    if forced_version:
        derived = _force_version(derived, forced_version)
    return derived.b58encode()


def derive_range(
    xkey: BIP32Key,
    der_path_prefix: BIP32DerPath,
    start: int,
    end: int,
    max_workers: Optional[int] = None,
) -> List[Tuple[List[int], BIP32KeyData]]:
    """Derive the hardened children start..end-1 of the key at the path prefix.

    Return (full path indexes, derived key) pairs in ascending index order;
    an empty list if end is not greater than start.
    The prefix is derived only once; with max_workers
    the children are derived on a pool of threads.
    """

    for i in (start, end):
        if not 0 <= i <= HARDENED:
            raise Bip32Error(f"invalid range boundary: {i}")
    if end <= start:
        return []

    prefix = indexes_from_bip32_path(der_path_prefix)
    parent = derive_path(xkey, prefix)

    def child(index: int) -> Tuple[List[int], BIP32KeyData]:
        return prefix + [index], derive_child(parent, index)

    indexes = range(start + HARDENED, end + HARDENED)
    LOGGER.debug("deriving hardened children %d..%d", start, end - 1)
    if max_workers is None:
        return [child(i) for i in indexes]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(child, indexes))
