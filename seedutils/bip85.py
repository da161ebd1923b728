#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP85 deterministic entropy from BIP32 keychains.

https://github.com/bitcoin/bips/blob/master/bip-0085.mediawiki

Child entropy is derived from a root private key along a fully hardened
path under the purpose 83696968', then stretched with HMAC-SHA512:
child mnemonics (application 39') and child root keys (application 32')
are one-way functions of the root key,
so they can be backed up by the root key alone.
"""

import logging
from typing import List, Tuple, Union

from seedutils.bip32.bip32 import BIP32Key, BIP32KeyData, _xkey, derive_path
from seedutils.bip32.der_path import (
    HARDENED,
    BIP32DerPath,
    indexes_from_bip32_path,
    str_from_bip32_path,
)
from seedutils.exceptions import BadWordCountError, Bip32Error, Bip85Error
from seedutils.hashes import hmac_sha512
from seedutils.mnemonic.bip39 import Mnemonic, WordCount
from seedutils.network import bip32_versions

LOGGER = logging.getLogger(__name__)

PURPOSE = 83696968
APP_BIP39 = 39
APP_XPRV = 32
# only English is supported
LANGUAGE_ENGLISH = 0

_HMAC_KEY = b"bip-entropy-from-k"


def _xprv(xprv: BIP32Key) -> BIP32KeyData:
    xkey = _xkey(xprv)
    if not xkey.is_private:
        raise Bip85Error("not a private key: BIP85 requires an extended private key")
    return xkey


def _check_index(index: int) -> None:
    if not 0 <= index < HARDENED:
        raise Bip85Error(f"invalid index: {index} not in 0..{HARDENED - 1}")


def entropy_from_path(xprv: BIP32Key, der_path: BIP32DerPath) -> bytes:
    "Return the 64 bytes of entropy derived at the (fully hardened) path."

    xkey = _xprv(xprv)
    indexes = indexes_from_bip32_path(der_path)
    if any(i < HARDENED for i in indexes):
        err_msg = f"non-hardened derivation path: {str_from_bip32_path(indexes)}"
        raise Bip85Error(err_msg)

    LOGGER.debug("deriving entropy at %s", str_from_bip32_path(indexes))
    try:
        derived = derive_path(xkey, indexes)
    except Bip32Error as e:
        raise Bip85Error("invalid derivation") from e
    return hmac_sha512(_HMAC_KEY, derived.key[1:])


def _word_count(word_count: Union[WordCount, int]) -> WordCount:
    if isinstance(word_count, WordCount):
        return word_count
    try:
        return WordCount.from_count(word_count)
    except BadWordCountError as e:
        raise Bip85Error(f"invalid word count: {word_count}") from e


def child_seed(
    xprv: BIP32Key, word_count: Union[WordCount, int], index: int
) -> Mnemonic:
    """Return the BIP39 child mnemonic at the given index.

    The path is m/83696968'/39'/0'/{words}'/{index}',
    0' being the English language.
    """

    word_count = _word_count(word_count)
    _check_index(index)
    der_path = [
        PURPOSE + HARDENED,
        APP_BIP39 + HARDENED,
        LANGUAGE_ENGLISH + HARDENED,
        word_count.count + HARDENED,
        index + HARDENED,
    ]
    entropy = entropy_from_path(xprv, der_path)
    return Mnemonic.from_entropy(entropy[: word_count.entropy_len])


def child_seeds(
    xprv: BIP32Key, word_count: Union[WordCount, int], start: int, end: int
) -> List[Tuple[int, Mnemonic]]:
    "Return the (index, mnemonic) child mnemonics for indexes start..end-1."

    xkey = _xprv(xprv)
    word_count = _word_count(word_count)
    return [(i, child_seed(xkey, word_count, i)) for i in range(start, end)]


def child_xprv(xprv: BIP32Key, index: int) -> str:
    """Return the child root extended private key at the given index.

    The path is m/83696968'/32'/{index}':
    the first 32 bytes of entropy are the private key,
    the second 32 bytes the chain code.
    """

    xkey = _xprv(xprv)
    _check_index(index)
    der_path = [PURPOSE + HARDENED, APP_XPRV + HARDENED, index + HARDENED]
    entropy = entropy_from_path(xkey, der_path)

    version = bip32_versions(xkey.slip132_version.network)[0]
    try:
        child = BIP32KeyData(
            version=version,
            depth=0,
            parent_fingerprint=b"\x00" * 4,
            index=0,
            chain_code=entropy[32:],
            key=b"\x00" + entropy[:32],
        )
    except Bip32Error as e:
        raise Bip85Error(f"invalid child private key at index {index}") from e
    return child.b58encode()
