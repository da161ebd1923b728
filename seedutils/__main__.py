#!/usr/bin/env python3

# Copyright (C) 2021-2022 The seedutils developers
#
# This file is part of seedutils. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of seedutils including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Entry point for 'python -m seedutils'."""

import sys

from seedutils.cli import main

sys.exit(main())
