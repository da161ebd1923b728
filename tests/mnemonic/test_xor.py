#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `seedutils.mnemonic.xor` module."

import pytest

from seedutils.exceptions import BadSeedError, BadWordCountError
from seedutils.mnemonic.bip39 import Mnemonic
from seedutils.mnemonic.xor import xor

SEEDS = [
    "romance wink lottery autumn shop bring dawn tongue range crater truth ability miss spice fitness easy legal release recall obey exchange recycle dragon room",
    "lion misery divide hurry latin fluid camp advance illegal lab pyramid unaware eager fringe sick camera series noodle toy crowd jeans select depth lounge",
    "vault nominee cradle silk own frown throw leg cactus recall talent worry gadget surface shy planet purpose coffee drip few seven term squeeze educate",
]
XORED = "silent toe meat possible chair blossom wait occur this worth option bag nurse find fish scene bench asthma bike wage world quit primary indoor"

SEED_12 = "artefact enact unable pigeon bottom traffic art antenna country clip inspire borrow"


def test_xor_vector() -> None:

    result = xor(SEEDS)
    assert result is not None
    assert str(result) == XORED
    assert result == Mnemonic.parse(XORED)


def test_xor_properties() -> None:

    a, b, c = (Mnemonic.parse(s) for s in SEEDS)
    # commutative
    assert xor([a, b]) == xor([b, a])
    assert xor([a, b, c]) == xor([c, a, b])
    # associative
    assert xor([xor([a, b]), c]) == xor([a, xor([b, c])])
    # identity and self-cancellation
    assert xor([a]) == a
    assert xor([SEEDS[0]]) == a
    assert xor([a, a]) == Mnemonic.from_entropy(b"\x00" * 32)
    assert xor([a, b, b]) == a
    # the result is a valid mnemonic
    assert Mnemonic.parse(str(xor([a, b]))) == xor([a, b])


def test_xor_empty() -> None:
    assert xor([]) is None


def test_xor_errors() -> None:

    with pytest.raises(BadWordCountError, match="mismatched word counts: "):
        xor([SEEDS[0], SEED_12])

    with pytest.raises(BadSeedError, match="unknown word: "):
        xor([SEEDS[0], SEEDS[1].replace("lion", "wagyu")])

    with pytest.raises(BadWordCountError, match="invalid word count: "):
        xor([SEEDS[0], "wagyu beef"])
