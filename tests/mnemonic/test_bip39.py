#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `seedutils.mnemonic.bip39` module."

import secrets

import pytest

from seedutils.exceptions import BadSeedError, BadWordCountError
from seedutils.mnemonic import bip39
from seedutils.mnemonic.bip39 import Mnemonic, WordCount

SEED_12 = "artefact enact unable pigeon bottom traffic art antenna country clip inspire borrow"


def test_word_count() -> None:

    assert [wc.count for wc in WordCount] == [12, 18, 24]
    assert [wc.entropy_len for wc in WordCount] == [16, 24, 32]
    assert [wc.checksum_bits for wc in WordCount] == [4, 6, 8]

    for wc in WordCount:
        assert WordCount.from_count(wc.count) == wc
        assert WordCount.from_entropy_len(wc.entropy_len) == wc

    for count in (0, 11, 15, 21, 25):
        with pytest.raises(BadWordCountError, match="invalid word count: "):
            WordCount.from_count(count)
    for nbytes in (0, 15, 20, 28, 33):
        with pytest.raises(BadWordCountError, match="invalid entropy length: "):
            WordCount.from_entropy_len(nbytes)


def test_bip39() -> None:

    mnem = "abandon abandon atom trust ankle walnut oil across awake bunker divorce abstract"
    raw_entr = bytes.fromhex("0000003974d093eda670121023cd0000")

    mnemonic = bip39.mnemonic_from_entropy(raw_entr)
    assert mnemonic == mnem
    assert bip39.mnemonic_from_entropy(raw_entr.hex()) == mnem
    assert bip39.entropy_from_mnemonic(mnemonic) == raw_entr

    wrong_mnemonic = mnemonic + " abandon"
    with pytest.raises(BadWordCountError, match="invalid word count: "):
        bip39.entropy_from_mnemonic(wrong_mnemonic)

    wr_m = "abandon abandon atom trust ankle walnut oil across awake bunker divorce oil"
    with pytest.raises(BadSeedError, match="invalid checksum: "):
        bip39.entropy_from_mnemonic(wr_m)

    xprv = "xprv9s21ZrQH143K3ZxBCax3Wu25iWt3yQJjdekBuGrVa5LDAvbLeCT99U59szPSFdnMe5szsWHbFyo8g5nAFowWJnwe8r6DiecBXTVGHG124G1"
    assert bip39.mxprv_from_mnemonic(mnemonic) == xprv


def test_vectors() -> None:
    """BIP39 test vectors

    https://github.com/trezor/python-mnemonic/blob/master/vectors.json
    """

    vectors = [
        (
            "00000000000000000000000000000000",
            "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about",
        ),
        (
            "7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f7f",
            "legal winner thank year wave sausage worth useful legal winner thank yellow",
        ),
        (
            "80808080808080808080808080808080",
            "letter advice cage absurd amount doctor acoustic avoid letter advice cage above",
        ),
        (
            "ffffffffffffffffffffffffffffffff",
            "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong",
        ),
        ("00" * 32, "abandon " * 23 + "art"),
        ("ff" * 32, "zoo " * 23 + "vote"),
    ]
    for entropy, words in vectors:
        assert bip39.mnemonic_from_entropy(entropy) == words
        assert bip39.entropy_from_mnemonic(words).hex() == entropy

    mnemonic = vectors[0][1]
    seed = "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e5349553"
    seed += "1f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
    assert bip39.seed_from_mnemonic(mnemonic, "TREZOR").hex() == seed
    xprv = "xprv9s21ZrQH143K3h3fDYiay8mocZ3afhfULfb5GX8kCBdno77K4HiA15Tg23wpbeF1pLfs1c5SPmYHrEpTuuRhxMwvKDwqdKiGJS9XFKzUsAF"
    assert bip39.mxprv_from_mnemonic(mnemonic, "TREZOR") == xprv


def test_mnemonic() -> None:

    mnemonic = Mnemonic.parse(SEED_12)
    assert mnemonic.word_count == WordCount.WORDS_12
    assert mnemonic.words == SEED_12.split()
    assert str(mnemonic) == SEED_12
    assert len(mnemonic.to_entropy()) == 16
    assert Mnemonic.from_entropy(mnemonic.to_entropy()) == mnemonic
    assert mnemonic.to_seed() == bip39.seed_from_mnemonic(SEED_12)
    assert mnemonic.to_seed("passphrase") != mnemonic.to_seed()

    # spurious whitespaces and upper case are tolerated
    messy = "  " + SEED_12.upper().replace(" ", " \t ") + "\n"
    assert Mnemonic.parse(messy) == mnemonic
    assert bip39.seed_from_mnemonic(messy) == mnemonic.to_seed()

    with pytest.raises(BadWordCountError, match="invalid word count: "):
        Mnemonic.parse("wagyu beef")
    with pytest.raises(BadWordCountError, match="invalid word count: "):
        Mnemonic.parse("")
    with pytest.raises(BadSeedError, match="unknown word: "):
        Mnemonic.parse(SEED_12.replace("artefact", "wagyu"))

    wrong_checksum = " ".join(SEED_12.split()[:-1] + ["antenna"])
    with pytest.raises(BadSeedError, match="invalid checksum: "):
        Mnemonic.parse(wrong_checksum)

    with pytest.raises(BadWordCountError, match="invalid entropy length: "):
        Mnemonic.from_entropy(b"\x00" * 20)


def test_checksum() -> None:

    for wc in WordCount:
        entropy = secrets.token_bytes(wc.entropy_len)
        mnemonic = Mnemonic.from_entropy(entropy)
        assert mnemonic.word_count == wc
        assert 0 <= mnemonic.checksum < 2 ** wc.checksum_bits
        # the checksum is the low bits of the last word index
        last_index = mnemonic.indexes[-1]
        assert last_index & (2 ** wc.checksum_bits - 1) == mnemonic.checksum
        assert Mnemonic.parse(str(mnemonic)) == mnemonic


def test_skip_checksum() -> None:

    wrong_checksum = " ".join(SEED_12.split()[:-1] + ["antenna"])
    seed = bip39.seed_from_mnemonic(wrong_checksum, verify_checksum=False)
    assert len(seed) == 64
    xprv = bip39.mxprv_from_mnemonic(wrong_checksum, verify_checksum=False)
    assert xprv.startswith("xprv")
    tprv = bip39.mxprv_from_mnemonic(SEED_12, network="testnet")
    assert tprv.startswith("tprv")
