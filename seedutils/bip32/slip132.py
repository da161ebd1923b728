#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SLIP132 extended key versions.

https://github.com/satoshilabs/slips/blob/master/slip-0132.md

The same BIP32 key can be serialized with different version prefixes,
hinting at the script type of its addresses (e.g. zpub for p2wpkh).
"""

import logging
from typing import List

from seedutils import base58
from seedutils.bip32.bip32 import BIP32Key, _xkey, derive, xpub_from_xprv
from seedutils.bip32.der_path import HARDENED
from seedutils.exceptions import Bip32Error, VersionError
from seedutils.network import Version

LOGGER = logging.getLogger(__name__)


def reencode(xkey: str, version: Version) -> str:
    """Return the extended key serialized with the given version.

    Only the 4 version bytes change: the key must be of the same
    (private or public) kind of the version,
    multi-signature versions are not supported.
    """

    if version.is_multisig:
        raise VersionError(f"multi-signature version not supported: {version.label}")

    try:
        xkey_bin = base58.b58decode(xkey.strip(), 78)
    except Bip32Error as e:
        raise VersionError(f"invalid extended key: {xkey!r}") from e

    is_private = xkey_bin[45] == 0
    if is_private != version.is_private:
        kind = "private" if is_private else "public"
        raise VersionError(f"cannot re-encode a {kind} key as {version.label}")

    LOGGER.debug("re-encoding extended key as %s", version.label)
    return base58.b58encode(version.prefix + xkey_bin[4:]).decode("ascii")


def derivation_path_for(version: Version) -> List[int]:
    "Return the BIP43 purpose'/coin_type' path prefix of the version."

    if version.purpose is None:
        raise VersionError(f"no derivation path for {version.label}")
    return [version.purpose + HARDENED, version.coin_type + HARDENED]


def account_xkey(xkey: BIP32Key, version: Version, account: int = 0) -> str:
    """Return the SLIP132 account key of a private root key.

    The account key is derived at purpose'/coin_type'/account',
    neutered if the version is a public one,
    and serialized with the given version.
    """

    xkey = _xkey(xkey)
    if not 0 <= account < HARDENED:
        raise Bip32Error(f"invalid account: {account}")
    if not xkey.is_root or not xkey.is_private:
        raise VersionError("not a private root key")

    der_path = derivation_path_for(version) + [account + HARDENED]
    account_key = derive(xkey, der_path)
    if not version.is_private:
        account_key = xpub_from_xprv(account_key)
    return reencode(account_key, version)


def _script_xkey(xkey: BIP32Key, purpose: int, account: int) -> str:

    xkey = _xkey(xkey)
    network = xkey.slip132_version.network
    version = next(
        v
        for v in Version
        if v.purpose == purpose and v.network == network and v.is_private
    )
    return account_xkey(xkey, version, account)


def p2pkh_xkey(xkey: BIP32Key, account: int = 0) -> str:
    "Return a p2pkh BIP32 xprv (tprv) account key."
    return _script_xkey(xkey, 44, account)


def p2wpkh_p2sh_xkey(xkey: BIP32Key, account: int = 0) -> str:
    "Return a p2wpkh-p2sh BIP32 yprv (uprv) account key."
    return _script_xkey(xkey, 49, account)


def p2wpkh_xkey(xkey: BIP32Key, account: int = 0) -> str:
    "Return a p2wpkh BIP32 zprv (vprv) account key."
    return _script_xkey(xkey, 84, account)
