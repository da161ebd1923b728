#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module seedutils.mnemonic."""

from seedutils.mnemonic.bip39 import (
    Mnemonic,
    WordCount,
    entropy_from_mnemonic,
    mnemonic_from_entropy,
    mxprv_from_mnemonic,
    seed_from_mnemonic,
)
from seedutils.mnemonic.entropy import extend, truncate
from seedutils.mnemonic.wordlist import WORDLIST
from seedutils.mnemonic.xor import xor

__all__ = [
    "Mnemonic",
    "WordCount",
    "entropy_from_mnemonic",
    "mnemonic_from_entropy",
    "mxprv_from_mnemonic",
    "seed_from_mnemonic",
    "extend",
    "truncate",
    "WORDLIST",
    "xor",
]
