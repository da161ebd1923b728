#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exclusive-or of BIP39 mnemonics.

The xor of n mnemonics is a mnemonic whose entropy is
the byte-wise xor of their entropies:
any n-1 of them give no information about the result.
It is commutative and associative, xor([s]) is s,
and xor([s, s]) is the all-zero entropy mnemonic.
"""

import logging
from functools import reduce
from typing import Iterable, Optional, Union

from seedutils.exceptions import BadWordCountError
from seedutils.mnemonic.bip39 import Mnemonic
from seedutils.utils import xor_bytes

LOGGER = logging.getLogger(__name__)


def xor(mnemonics: Iterable[Union[str, Mnemonic]]) -> Optional[Mnemonic]:
    """Return the xor of the given mnemonics, None if there are none.

    All mnemonics must have the same number of words.
    """

    parsed = [m if isinstance(m, Mnemonic) else Mnemonic.parse(m) for m in mnemonics]
    if not parsed:
        return None

    word_counts = {m.word_count.count for m in parsed}
    if len(word_counts) > 1:
        err_msg = f"mismatched word counts: {sorted(word_counts)}"
        raise BadWordCountError(err_msg)

    LOGGER.debug("xoring %d mnemonics", len(parsed))
    entropy = reduce(xor_bytes, (m.to_entropy() for m in parsed))
    return Mnemonic.from_entropy(entropy)
