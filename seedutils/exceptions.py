#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

Every error raised on purpose by seedutils derives from SeedUtilsError,
so that callers can tell them apart from those raised by other codebase.

Invalid input always results in a SeedUtilsValueError subclass,
naming the kind of failure; the lower-level cause, if any,
is chained as __cause__.

SeedUtilsRuntimeError is reserved to broken internal invariants.
"""


class SeedUtilsError(Exception):
    pass


class SeedUtilsValueError(SeedUtilsError, ValueError):
    pass


class SeedUtilsRuntimeError(SeedUtilsError, RuntimeError):
    pass


class BadWordCountError(SeedUtilsValueError):
    "Word count is not 12, 18 or 24 (or entropy is not 16, 24 or 32 bytes)."


class BadSeedError(SeedUtilsValueError):
    "Unknown word or wrong checksum."


class WordCountTooHighError(SeedUtilsValueError):
    "Word count is higher than expected for the operation."


class WordCountTooLowError(SeedUtilsValueError):
    "Word count is lower than expected for the operation."


class Bip32Error(SeedUtilsValueError):
    "Bad child number, derivation path, base58 encoding, length or key."


class Bip85Error(SeedUtilsValueError):
    "Invalid index, word count or key for BIP85 derivation."


class VersionError(SeedUtilsValueError):
    "Extended key version without single-sig path, or invalid extended key."
