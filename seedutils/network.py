#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Extended key versions (SLIP132) and their networks.

https://github.com/satoshilabs/slips/blob/master/slip-0132.md

=====  =====  =======  ===================  ========
pub    prv    network  script type          path
=====  =====  =======  ===================  ========
xpub   xprv   mainnet  p2pkh or p2sh        m/44h/0h
ypub   yprv   mainnet  p2wpkh-p2sh          m/49h/0h
zpub   zprv   mainnet  p2wpkh               m/84h/0h
Ypub   Yprv   mainnet  multisig p2wsh-p2sh  none
Zpub   Zprv   mainnet  multisig p2wsh       none
tpub   tprv   testnet  p2pkh or p2sh        m/44h/1h
upub   uprv   testnet  p2wpkh-p2sh          m/49h/1h
vpub   vprv   testnet  p2wpkh               m/84h/1h
Upub   Uprv   testnet  multisig p2wsh-p2sh  none
Vpub   Vprv   testnet  multisig p2wsh       none
=====  =====  =======  ===================  ========
"""

from enum import Enum
from typing import List, Optional

from seedutils.alias import Octets
from seedutils.exceptions import VersionError
from seedutils.utils import bytes_from_octets

NETWORKS = ("mainnet", "testnet")


class Version(Enum):
    """Extended key version.

    Each member carries its 4 bytes prefix,
    the BIP43 purpose (None for multi-signature versions),
    the network, and whether it is a private or public key version.
    """

    XPUB = ("0488b21e", 44, "mainnet", False)
    XPRV = ("0488ade4", 44, "mainnet", True)
    YPUB = ("049d7cb2", 49, "mainnet", False)
    YPRV = ("049d7878", 49, "mainnet", True)
    ZPUB = ("04b24746", 84, "mainnet", False)
    ZPRV = ("04b2430c", 84, "mainnet", True)
    YPUB_MULTISIG = ("0295b43f", None, "mainnet", False)
    YPRV_MULTISIG = ("0295b005", None, "mainnet", True)
    ZPUB_MULTISIG = ("02aa7ed3", None, "mainnet", False)
    ZPRV_MULTISIG = ("02aa7a99", None, "mainnet", True)
    TPUB = ("043587cf", 44, "testnet", False)
    TPRV = ("04358394", 44, "testnet", True)
    UPUB = ("044a5262", 49, "testnet", False)
    UPRV = ("044a4e28", 49, "testnet", True)
    VPUB = ("045f1cf6", 84, "testnet", False)
    VPRV = ("045f18bc", 84, "testnet", True)
    UPUB_MULTISIG = ("024289ef", None, "testnet", False)
    UPRV_MULTISIG = ("024285b5", None, "testnet", True)
    VPUB_MULTISIG = ("02575483", None, "testnet", False)
    VPRV_MULTISIG = ("02575048", None, "testnet", True)

    def __init__(
        self, prefix: str, purpose: Optional[int], network: str, is_private: bool
    ) -> None:
        self.prefix = bytes.fromhex(prefix)
        self.purpose = purpose
        self.network = network
        self.is_private = is_private

    @property
    def is_multisig(self) -> bool:
        return self.purpose is None

    @property
    def is_testnet(self) -> bool:
        return self.network == "testnet"

    @property
    def coin_type(self) -> int:
        return 1 if self.is_testnet else 0

    @property
    def label(self) -> str:
        "The base58 encoded key prefix, e.g. 'zpub' or 'Zpub' (multi-signature)."
        label = self.name[:4].lower()
        return label.capitalize() if self.is_multisig else label

    @property
    def counterpart(self) -> "Version":
        "The public version for a private one, and vice versa."
        if self.is_private:
            return Version[self.name.replace("PRV", "PUB")]
        return Version[self.name.replace("PUB", "PRV")]

    @classmethod
    def from_prefix(cls, prefix: Octets) -> "Version":
        prefix = bytes_from_octets(prefix)
        for version in cls:
            if version.prefix == prefix:
                return version
        raise VersionError(f"unknown extended key version: 0x{prefix.hex()}")

    @classmethod
    def from_name(cls, name: str) -> "Version":
        """Return the version from its label (e.g. 'zpub', 'Zprv').

        Member names are accepted too (e.g. 'ZPUB_MULTISIG').
        """
        name = name.strip()
        for version in cls:
            if name in (version.label, version.name):
                return version
        raise VersionError(f"unknown extended key version: {name!r}")


XPRV_VERSIONS_ALL: List[bytes] = [v.prefix for v in Version if v.is_private]
XPUB_VERSIONS_ALL: List[bytes] = [v.prefix for v in Version if not v.is_private]


def bip32_versions(network: str = "mainnet") -> List[Version]:
    "Return the plain BIP32 (private, public) versions of the network."

    if network == "mainnet":
        return [Version.XPRV, Version.XPUB]
    if network == "testnet":
        return [Version.TPRV, Version.TPUB]
    raise VersionError(f"unknown network: {network!r}, not in {NETWORKS}")
