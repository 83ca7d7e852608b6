"""
Allow running the notifier with ``python -m void_updates``.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

import sys

from .main import main

sys.exit(main())
