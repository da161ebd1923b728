#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `seedutils.mnemonic.wordlist` module."

import pytest

from seedutils.exceptions import BadSeedError, SeedUtilsRuntimeError
from seedutils.mnemonic.wordlist import WORDLIST, WordList


def test_wordlist() -> None:

    words = WORDLIST.wordlist()
    assert len(words) == 2048
    assert len(set(words)) == 2048
    assert words == sorted(words)
    assert WORDLIST.word(0) == "abandon"
    assert WORDLIST.word(2047) == "zoo"

    for i in (0, 1, 1024, 2047):
        assert WORDLIST.index(WORDLIST.word(i)) == i
    assert WORDLIST.index("ZOO") == 2047
    assert WORDLIST.index(" Abandon ".strip()) == 0

    with pytest.raises(BadSeedError, match="unknown word: "):
        WORDLIST.index("wagyu")


def test_broken_wordlist(tmp_path) -> None:

    filename = tmp_path / "words.txt"
    filename.write_text("abandon\nability\nable\n", encoding="utf-8")
    wordlist = WordList(str(filename))
    with pytest.raises(SeedUtilsRuntimeError, match="invalid word-list length: "):
        wordlist.wordlist()
