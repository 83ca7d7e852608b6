"""
Void Update Notifier

Cross-references the void-updates reports published for Void Linux with the
packages installed on this machine and the packages you maintain, and prints
the upstream updates that concern you.
"""

# SPDX-License-Identifier: GPL-3.0-or-later

__version__ = "1.0.0"
__author__ = "NeatCode Labs"
__email__ = "neatcodelabs@gmail.com"
