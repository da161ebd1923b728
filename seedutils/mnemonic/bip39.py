#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP39 entropy / mnemonic / seed functions.

https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki.

Checksummed entropy (**ENT+CS**) is converted from/to mnemonic.

* bits per word = bpw = 11
* **ENT** = raw entropy
* **CS** = checksum = **ENT** / 32
* **MS** = words in the mnemonic sentence = (**ENT+CS**) / bpw

+-----+----+--------+----+
| ENT | CS | ENT+CS | MS |
+=====+====+========+====+
| 128 |  4 |    132 | 12 |
+-----+----+--------+----+
| 192 |  6 |    198 | 18 |
+-----+----+--------+----+
| 256 |  8 |    264 | 24 |
+-----+----+--------+----+

Only 12, 18, and 24 words mnemonics are supported.
"""

import unicodedata
from dataclasses import dataclass
from enum import Enum
from hashlib import pbkdf2_hmac, sha256
from typing import List, Type

from seedutils.alias import Octets
from seedutils.exceptions import BadSeedError, BadWordCountError
from seedutils.mnemonic.wordlist import WORDLIST
from seedutils.utils import bytes_from_octets

_BITS_PER_WORD = 11
_PBKDF2_ROUNDS = 2048
_SEED_SIZE = 64


class WordCount(Enum):
    "Valid number of words in a mnemonic."

    WORDS_12 = 12
    WORDS_18 = 18
    WORDS_24 = 24

    @property
    def count(self) -> int:
        return self.value

    @property
    def entropy_len(self) -> int:
        "Entropy length in bytes."
        return self.value * _BITS_PER_WORD * 32 // 33 // 8

    @property
    def checksum_bits(self) -> int:
        return self.entropy_len * 8 // 32

    @classmethod
    def from_count(cls, count: int) -> "WordCount":
        try:
            return cls(int(count))
        except ValueError:
            err_msg = f"invalid word count: {count} not in (12, 18, 24)"
            raise BadWordCountError(err_msg) from None

    @classmethod
    def from_entropy_len(cls, nbytes: int) -> "WordCount":
        for word_count in cls:
            if word_count.entropy_len == nbytes:
                return word_count
        err_msg = f"invalid entropy length: {nbytes} bytes not in (16, 24, 32)"
        raise BadWordCountError(err_msg)


def _checksum(entropy: bytes) -> int:
    "Return the leftmost ENT/32 bits of SHA256(entropy) as int."

    checksum_bits = len(entropy) * 8 // 32
    return sha256(entropy).digest()[0] >> (8 - checksum_bits)


@dataclass(frozen=True)
class Mnemonic:
    """BIP39 mnemonic, i.e. entropy plus its checksum.

    The checksum is always computed, never provided:
    use Mnemonic.parse for a word sentence
    or Mnemonic.from_entropy for raw entropy.
    """

    entropy: bytes

    def __post_init__(self) -> None:
        entropy = bytes(self.entropy)
        # also validates the entropy length
        WordCount.from_entropy_len(len(entropy))
        object.__setattr__(self, "entropy", entropy)

    @property
    def word_count(self) -> WordCount:
        return WordCount.from_entropy_len(len(self.entropy))

    @property
    def checksum(self) -> int:
        return _checksum(self.entropy)

    @property
    def indexes(self) -> List[int]:
        "Word-list indexes of the checksummed entropy."

        word_count = self.word_count
        cs_bits = word_count.checksum_bits
        int_entropy = int.from_bytes(self.entropy, byteorder="big", signed=False)
        cs_entropy = (int_entropy << cs_bits) | self.checksum
        mask = (1 << _BITS_PER_WORD) - 1
        n = word_count.count
        return [
            (cs_entropy >> (_BITS_PER_WORD * (n - 1 - i))) & mask for i in range(n)
        ]

    @property
    def words(self) -> List[str]:
        return [WORDLIST.word(i) for i in self.indexes]

    def __str__(self) -> str:
        return " ".join(self.words)

    def to_entropy(self) -> bytes:
        return self.entropy

    def to_seed(self, passphrase: str = "") -> bytes:
        "Return the 64 bytes seed, stretching the mnemonic with PBKDF2."
        return _seed(str(self), passphrase)

    @classmethod
    def from_entropy(cls: Type["Mnemonic"], entropy: Octets) -> "Mnemonic":
        return cls(bytes_from_octets(entropy))

    @classmethod
    def parse(cls: Type["Mnemonic"], mnemonic: str) -> "Mnemonic":
        """Return the Mnemonic of a word sentence.

        Spurious whitespaces are ignored;
        word count, words, and checksum are validated.
        """

        words = mnemonic.split()
        word_count = WordCount.from_count(len(words))
        cs_bits = word_count.checksum_bits

        cs_entropy = 0
        for word in words:
            cs_entropy = (cs_entropy << _BITS_PER_WORD) + WORDLIST.index(word)

        checksum = cs_entropy & ((1 << cs_bits) - 1)
        int_entropy = cs_entropy >> cs_bits
        entropy = int_entropy.to_bytes(
            word_count.entropy_len, byteorder="big", signed=False
        )
        expected = _checksum(entropy)
        if checksum != expected:
            err_msg = f"invalid checksum: {checksum:0{cs_bits}b}"
            err_msg += f"; expected: {expected:0{cs_bits}b}"
            raise BadSeedError(err_msg)
        return cls(entropy)


def _seed(mnemonic: str, passphrase: str) -> bytes:

    password = unicodedata.normalize("NFKD", mnemonic).encode()
    salt = unicodedata.normalize("NFKD", "mnemonic" + passphrase).encode()
    return pbkdf2_hmac("sha512", password, salt, _PBKDF2_ROUNDS, _SEED_SIZE)


def mnemonic_from_entropy(entropy: Octets) -> str:
    """Convert input entropy to BIP39 checksummed mnemonic sentence.

    Input entropy can be expressed as bytes or hex-string;
    it must be 128, 192, or 256 bits.
    Leading zeros are considered genuine entropy, not redundant padding.
    """

    return str(Mnemonic.from_entropy(entropy))


def entropy_from_mnemonic(mnemonic: str) -> bytes:
    "Return the entropy from the BIP39 checksummed mnemonic sentence."

    return Mnemonic.parse(mnemonic).to_entropy()


def seed_from_mnemonic(
    mnemonic: str, passphrase: str = "", verify_checksum: bool = True
) -> bytes:
    """Return the seed from the provided BIP39 mnemonic sentence.

    The mnemonic checksum verification can be skipped if needed.
    """

    if verify_checksum:
        return Mnemonic.parse(mnemonic).to_seed(passphrase)

    # clean up mnemonic from spurious whitespaces
    return _seed(" ".join(mnemonic.split()), passphrase)


def mxprv_from_mnemonic(
    mnemonic: str,
    passphrase: str = "",
    network: str = "mainnet",
    verify_checksum: bool = True,
) -> str:
    "Return BIP32 root master extended private key from BIP39 mnemonic."

    # pylint: disable=import-outside-toplevel
    from seedutils.bip32.bip32 import rootxprv_from_seed
    from seedutils.network import bip32_versions

    seed = seed_from_mnemonic(mnemonic, passphrase, verify_checksum)
    return rootxprv_from_seed(seed, bip32_versions(network)[0])
