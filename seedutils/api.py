#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Seed level operations.

Seeds are BIP39 mnemonic sentences:
each function parses its input seed(s), validating words and checksum,
and returns mnemonics or extended keys.
These are the operations behind the seed-utils command line tool.
"""

import logging
import secrets
from typing import Iterable, List, Optional, Tuple, Union

from seedutils.bip32.bip32 import (
    BIP32KeyData,
    _xpub_from_xprv,
    derive_range,
    master_key,
)
from seedutils.bip32.der_path import str_from_bip32_path
from seedutils.bip32.slip132 import derivation_path_for
from seedutils.bip85 import child_seeds
from seedutils.mnemonic.bip39 import Mnemonic, WordCount
from seedutils.mnemonic.entropy import RandomSource, extend, truncate
from seedutils.mnemonic.xor import xor
from seedutils.network import Version, bip32_versions

LOGGER = logging.getLogger(__name__)

Seed = Union[str, Mnemonic]


def _mnemonic(seed: Seed) -> Mnemonic:
    return seed if isinstance(seed, Mnemonic) else Mnemonic.parse(seed)


def derive_root_xprv(
    seed: Seed, passphrase: str = "", network: str = "mainnet"
) -> BIP32KeyData:
    "Return the BIP32 root extended private key of the seed."

    bip39_seed = _mnemonic(seed).to_seed(passphrase)
    return master_key(bip39_seed, bip32_versions(network)[0])


def derive_root_xpub(
    seed: Seed, passphrase: str = "", network: str = "mainnet"
) -> BIP32KeyData:
    "Return the BIP32 root extended public key of the seed."

    return _xpub_from_xprv(derive_root_xprv(seed, passphrase, network))


def derive_xprvs_from_seed(
    seed: Seed,
    start: int,
    end: int,
    version: Version = Version.XPRV,
    passphrase: str = "",
    max_workers: Optional[int] = None,
) -> List[Tuple[str, BIP32KeyData]]:
    """Return the account extended private keys for indexes start..end-1.

    The version selects the purpose'/coin_type' derivation path;
    keys are serialized with the plain BIP32 version of the network,
    use seedutils.bip32.slip132.reencode for the SLIP132 one.
    """

    der_path = derivation_path_for(version)
    root = derive_root_xprv(seed, passphrase, version.network)
    LOGGER.debug("deriving %s account keys %d..%d", version.label, start, end - 1)
    return [
        (str_from_bip32_path(indexes, "'"), xkey)
        for indexes, xkey in derive_range(root, der_path, start, end, max_workers)
    ]


def derive_xpubs_from_seed(
    seed: Seed,
    start: int,
    end: int,
    version: Version = Version.XPUB,
    passphrase: str = "",
    max_workers: Optional[int] = None,
) -> List[Tuple[str, BIP32KeyData]]:
    "Return the account extended public keys for indexes start..end-1."

    xprvs = derive_xprvs_from_seed(seed, start, end, version, passphrase, max_workers)
    return [(der_path, _xpub_from_xprv(xprv)) for der_path, xprv in xprvs]


def derive_child_seeds(
    seed: Seed,
    start: int,
    end: int,
    word_count: WordCount = WordCount.WORDS_24,
    passphrase: str = "",
) -> List[Tuple[int, Mnemonic]]:
    "Return the BIP85 (index, child seed) pairs for indexes start..end-1."

    root = derive_root_xprv(seed, passphrase)
    return child_seeds(root, word_count, start, end)


def extend_seed(
    seed: Seed,
    word_count: WordCount = WordCount.WORDS_24,
    rng: RandomSource = secrets.token_bytes,
) -> Mnemonic:
    "Return a longer seed starting with the same words."
    return extend(_mnemonic(seed), word_count, rng)


def truncate_seed(seed: Seed, word_count: WordCount = WordCount.WORDS_12) -> Mnemonic:
    "Return a shorter seed starting with the same words."
    return truncate(_mnemonic(seed), word_count)


def xor_seeds(seeds: Iterable[Seed]) -> Optional[Mnemonic]:
    "Return the xor of the seeds, None if there are none."
    return xor(seeds)
