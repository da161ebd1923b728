#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Entropy extension and truncation of BIP39 mnemonics.

Growing a mnemonic appends fresh random bytes to its entropy,
shrinking it keeps the leading bytes only:
in both cases the common entropy prefix is preserved,
so that a 24 words mnemonic truncated to 12 words
and then extended back to 24 words starts with the same words.
Only the last word(s) differ, as the checksum changes.
"""

import logging
import secrets
from typing import Callable, Union

from seedutils.exceptions import (
    SeedUtilsRuntimeError,
    WordCountTooHighError,
    WordCountTooLowError,
)
from seedutils.mnemonic.bip39 import Mnemonic, WordCount

LOGGER = logging.getLogger(__name__)

RandomSource = Callable[[int], bytes]


def _mnemonic(mnemonic: Union[str, Mnemonic]) -> Mnemonic:
    if isinstance(mnemonic, Mnemonic):
        return mnemonic
    return Mnemonic.parse(mnemonic)


def extend(
    mnemonic: Union[str, Mnemonic],
    target: WordCount,
    rng: RandomSource = secrets.token_bytes,
) -> Mnemonic:
    """Return a mnemonic with (at least) the target number of words.

    The entropy of the input mnemonic is kept as prefix
    and the missing bytes are drawn from the rng callable,
    a cryptographically secure source by default.
    """

    mnemonic = _mnemonic(mnemonic)
    source = mnemonic.word_count
    if source.count > target.count:
        err_msg = f"cannot extend {source.count} words to {target.count} words"
        raise WordCountTooHighError(err_msg)

    n_bytes = target.entropy_len - source.entropy_len
    if n_bytes == 0:
        return mnemonic

    LOGGER.debug("extending %d words to %d words", source.count, target.count)
    extra = bytes(rng(n_bytes))
    if len(extra) != n_bytes:
        err_msg = f"random source returned {len(extra)} bytes instead of {n_bytes}"
        raise SeedUtilsRuntimeError(err_msg)
    return Mnemonic.from_entropy(mnemonic.to_entropy() + extra)


def truncate(mnemonic: Union[str, Mnemonic], target: WordCount) -> Mnemonic:
    "Return a mnemonic with the target number of words, keeping its entropy prefix."

    mnemonic = _mnemonic(mnemonic)
    source = mnemonic.word_count
    if source.count < target.count:
        err_msg = f"cannot truncate {source.count} words to {target.count} words"
        raise WordCountTooLowError(err_msg)

    if source == target:
        return mnemonic

    LOGGER.debug("truncating %d words to %d words", source.count, target.count)
    return Mnemonic.from_entropy(mnemonic.to_entropy()[: target.entropy_len])
