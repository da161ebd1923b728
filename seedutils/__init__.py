#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the seedutils package."

name = "seedutils"
__version__ = "2022.6.1"
__author__ = "The seedutils developers"
__author_email__ = "devs@seedutils.org"
__copyright__ = "Copyright (C) 2021-2022 The seedutils developers"
__license__ = "MIT License"
