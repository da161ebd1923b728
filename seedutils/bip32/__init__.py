#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module seedutils.bip32."""

from seedutils.bip32.bip32 import (
    BIP32Key,
    BIP32KeyData,
    derive,
    derive_child,
    derive_path,
    derive_pub_child,
    derive_range,
    master_key,
    rootxprv_from_seed,
    xpub_from_xprv,
)
from seedutils.bip32.der_path import (
    HARDENED,
    bytes_from_bip32_path,
    indexes_from_bip32_path,
    int_from_index_str,
    str_from_bip32_path,
    str_from_index_int,
)

__all__ = [
    "BIP32Key",
    "BIP32KeyData",
    "derive",
    "derive_child",
    "derive_path",
    "derive_pub_child",
    "derive_range",
    "master_key",
    "rootxprv_from_seed",
    "xpub_from_xprv",
    "HARDENED",
    "bytes_from_bip32_path",
    "indexes_from_bip32_path",
    "int_from_index_str",
    "str_from_bip32_path",
    "str_from_index_int",
]
