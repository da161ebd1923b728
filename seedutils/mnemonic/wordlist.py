#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP39 English word-list.

The word-list is from
https://github.com/bitcoin/bips/blob/master/bip-0039/english.txt
and it is loaded only if needed, reading it only once from disk.
"""

import unicodedata
from os import path
from typing import Dict, List

from seedutils.exceptions import BadSeedError, SeedUtilsRuntimeError

_FILENAME = path.join(path.dirname(__file__), "_data", "english.txt")
_WORDS = 2048


class WordList:
    """Word-list to be used in entropy/mnemonic conversions.

    Each word encodes 11 bits, i.e. its index in the 2048 words list.
    """

    def __init__(self, filename: str = _FILENAME) -> None:
        self.filename = filename
        self._words: List[str] = []
        self._indexes: Dict[str, int] = {}

    def _load(self) -> None:

        if self._words:
            return

        with open(self.filename, "r", encoding="utf-8") as file_:
            words = [line.strip() for line in file_ if line.strip()]

        # a broken package, not a user error
        if len(words) != _WORDS:
            err_msg = f"invalid word-list length: {len(words)} instead of {_WORDS}"
            raise SeedUtilsRuntimeError(err_msg)

        self._indexes = {w: i for i, w in enumerate(words)}
        self._words = words

    def wordlist(self) -> List[str]:
        """Return the word-list."""

        self._load()
        return self._words

    def word(self, index: int) -> str:
        """Return the word at the given index."""

        self._load()
        return self._words[index]

    def index(self, word: str) -> int:
        """Return the index of the given word.

        Words are NFKD normalized and compared case-insensitively.
        """

        self._load()
        normalized = unicodedata.normalize("NFKD", word).lower()
        try:
            return self._indexes[normalized]
        except KeyError:
            raise BadSeedError(f"unknown word: {word!r}") from None


# singleton
WORDLIST = WordList()
