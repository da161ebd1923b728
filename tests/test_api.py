#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `seedutils.api` module."

import pytest

from seedutils import api
from seedutils.bip32.slip132 import reencode
from seedutils.exceptions import (
    BadSeedError,
    BadWordCountError,
    VersionError,
    WordCountTooHighError,
    WordCountTooLowError,
)
from seedutils.mnemonic.bip39 import Mnemonic, WordCount
from seedutils.network import Version

SEED_12 = "artefact enact unable pigeon bottom traffic art antenna country clip inspire borrow"
ROOT_XPRV = "xprv9s21ZrQH143K3rd3KuNUKxQMNEJsXTxUSuN9RQSm92oJEduoR4wnBneKzSdBDTnv9NtN9VJ2abs66gmM1rNbTdFKHoQPPMeyciwZZqsUbVC"
ROOT_XPUB = "xpub661MyMwAqRbcGLhWRvuUh6M5vG9MvvgKp8HkDnrNhNLH7SEwxcG2jaxoqgd5sQf8iQNLMV7F5kSczN52jPqaYRnACAZSjfGuX5sj3AdRDPM"

XPRVS = {
    Version.XPRV: [
        ("m/44'/0'/0'", "xprv9yG8MuRhkRHFKzBVybi9MP13e4xrMYo9hWcp9sUEfAwXcCDNz29CET74FAGwfk6yFceEHpuk5XUrmQnJSJW4dHcmJnwhJj6ee9h2kQUaDz5"),
        ("m/44'/0'/1'", "xprv9yG8MuRhkRHFPTa4tJbapc9G4QLgfZtqKJ4xsk4p3nsVYDVVERMa9xmiwRPKkpxb9WRJAWakwVja38WRH9FTHbaXcBxsqaT7sk8GzTsKneJ"),
    ],
    Version.YPRV: [
        ("m/49'/0'/0'", "xprv9yvxNCHWSBEQ7AtVCjf2jGK3qHULFkM55EqwcEktzUYLWMy9SiJJ2CTCK24m6sxpim2a7yYY9usaB1nLD6SvkupHCRZz7AE2U8ywMH2jbxU"),
        ("m/49'/0'/1'", "xprv9yvxNCHWSBEQAqZpE9kUdUu7wbPUSvaC5YP43SyqxRLAHE5HBwe92omAxDMhfZrmV9m2vS46n9xk6JxBwAHq6GfwRto7VnshAwa2bmF33am"),
    ],
    Version.ZPRV: [
        ("m/84'/0'/0'", "xprv9zFNLT61T56ccvGNiPh3f1XiWSaGJTwUJYTLvGBdNGfhg2EddRjVwRAUV2LgdiVS5g8ffzUiucZzaZFGcjVjTXsTQGRgndqp5CG6wsG6cvx"),
        ("m/84'/0'/1'", "xprv9zFNLT61T56cdVw4WVXh5KZFupHAkDXCKTL8oy4WCfznHsafM3wYuCedYQN91v5WYr2LPr2HX3ZrdspypqnXnHjqvNY117FRnKJZfjM3qBF"),
    ],
}
XPUBS = {
    Version.XPUB: [
        ("m/44'/0'/0'", "xpub6CFUmQxbanqYYUFy5dF9iWwnC6oLm1X14jYQxFsrDWUWUzYXXZTSnFRY6T9e7V9R1762jkvCHAF7PVQ3rJtC5dwCCA7PkCqoxfrDBhyot63"),
        ("m/44'/0'/1'", "xpub6CFUmQxbanqYbweXzL8bBk5zcSBB52cggWzZg8URc8QUR1pdmxfphm6CngQSPYbHJopuBLZg7qnMceyfUWN7r5RXeYQKEvArPzkstv1LiBy"),
    ],
    Version.YPUB: [
        ("m/49'/0'/0'", "xpub6CvJmhpQGYnhKexxJmC36QFnPKJpfD4vSTmYQdAWYp5KPAJHzFcYZzmgAJQeMDK57oRiw1cpxVmzadQJDJ9L1LW6cCiWtXvF8jJmqicHeJi"),
        ("m/49'/0'/1'", "xpub6CvJmhpQGYnhPKeHLBHUzcqrVdDxrPJ3SmJeqqPTWks9A2QRjUxPac5eoV5TtfnhKAQQgKZE377ZmoJc9oe6PSTnP8ETdRTg4tmgARXSUNE"),
    ],
    Version.ZPUB: [
        ("m/84'/0'/0'", "xpub6DEijxcuHSeuqQLqpRE429UT4UQkhvfKfmNwiebEvcCgYpZnAy3kVDUxLKqDpPCnho5hjvsoxLB88c3pPXero4YMsNnCeh6jjqhxyA6gT6Q"),
        ("m/84'/0'/1'", "xpub6DEijxcuHSeuqz1XcX4hSTVzTr7f9gF3ggFjcMU7m1XmAfuotbFoSzy7PhzSPZA9xyYuAysaSrfjuF6caLTa81bAmreaHavVQakAuPKdYQj"),
    ],
}


def test_root_keys() -> None:

    assert api.derive_root_xprv(SEED_12).b58encode() == ROOT_XPRV
    assert api.derive_root_xpub(SEED_12).b58encode() == ROOT_XPUB
    assert api.derive_root_xprv(Mnemonic.parse(SEED_12)).b58encode() == ROOT_XPRV

    assert api.derive_root_xprv(SEED_12, "passphrase").b58encode() != ROOT_XPRV
    assert api.derive_root_xprv(SEED_12, network="testnet").b58encode().startswith("tprv")

    with pytest.raises(BadWordCountError):
        api.derive_root_xprv("wagyu beef")
    wrong_checksum = " ".join(SEED_12.split()[:-1] + ["antenna"])
    with pytest.raises(BadSeedError, match="invalid checksum: "):
        api.derive_root_xpub(wrong_checksum)


def test_account_xprvs() -> None:

    for version, expected in XPRVS.items():
        xprvs = api.derive_xprvs_from_seed(SEED_12, 0, 2, version)
        assert [(path, xkey.b58encode()) for path, xkey in xprvs] == expected
        # same result on a pool of threads
        xprvs = api.derive_xprvs_from_seed(SEED_12, 0, 2, version, max_workers=2)
        assert [(path, xkey.b58encode()) for path, xkey in xprvs] == expected
        # the public version selects the same derivation path
        xprvs = api.derive_xprvs_from_seed(SEED_12, 1, 2, version.counterpart)
        assert [(path, xkey.b58encode()) for path, xkey in xprvs] == expected[1:]


def test_account_xpubs() -> None:

    for version, expected in XPUBS.items():
        xpubs = api.derive_xpubs_from_seed(SEED_12, 0, 2, version)
        assert [(path, xkey.b58encode()) for path, xkey in xpubs] == expected

    path, zpub = api.derive_xpubs_from_seed(SEED_12, 0, 1, Version.ZPUB)[0]
    assert reencode(zpub.b58encode(), Version.ZPUB).startswith("zpub")

    assert api.derive_xpubs_from_seed(SEED_12, 2, 2) == []
    assert api.derive_xpubs_from_seed(SEED_12, 2, 0) == []

    with pytest.raises(VersionError, match="no derivation path for "):
        api.derive_xpubs_from_seed(SEED_12, 0, 1, Version.ZPUB_MULTISIG)


def test_child_seeds() -> None:

    seed = "almost talk bulk high steel flush siege intact liberty radar journey bullet little olympic suffer neck clock glad furnace undo outdoor useful feature mobile"
    child = "loyal utility atom boat debris blush skull rare cool bamboo stage ritual"
    children = api.derive_child_seeds(seed, 0, 1, WordCount.WORDS_12)
    assert [(i, str(m)) for i, m in children] == [(0, child)]

    children = api.derive_child_seeds(seed, 0, 3)
    assert [i for i, _ in children] == [0, 1, 2]
    assert all(m.word_count == WordCount.WORDS_24 for _, m in children)
    assert api.derive_child_seeds(seed, 3, 0) == []


def test_seed_transforms() -> None:

    extended = api.extend_seed(SEED_12, WordCount.WORDS_18, lambda n: b"\xff" * n)
    assert extended.word_count == WordCount.WORDS_18
    assert extended.words[:11] == SEED_12.split()[:11]
    assert api.truncate_seed(extended, WordCount.WORDS_12) == Mnemonic.parse(SEED_12)
    assert api.truncate_seed(str(extended)) == Mnemonic.parse(SEED_12)

    with pytest.raises(WordCountTooHighError):
        api.extend_seed(extended, WordCount.WORDS_12)
    with pytest.raises(WordCountTooLowError):
        api.truncate_seed(SEED_12, WordCount.WORDS_24)

    assert api.xor_seeds([]) is None
    zero = Mnemonic.from_entropy(b"\x00" * 16)
    assert api.xor_seeds([SEED_12, SEED_12]) == zero
    with pytest.raises(BadWordCountError, match="mismatched word counts: "):
        api.xor_seeds([SEED_12, extended])
