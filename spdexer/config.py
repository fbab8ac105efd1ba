"""
spdexer configuration.

Environment overrides for the defaults in ``spdexer.constants``.
"""

import os

from spdexer.constants import DEFAULT_FILE_MODE, DEFAULT_LICENSE

# License selected when --license is not given
LICENSE = os.environ.get("SPDEXER_LICENSE", DEFAULT_LICENSE)

# Permission bits applied to every rewritten file (octal string, e.g. "644")
FILE_MODE = int(os.environ.get("SPDEXER_FILE_MODE", format(DEFAULT_FILE_MODE, "o")), 8)

# Root directory walked when --path is not given
ROOT = os.environ.get("SPDEXER_ROOT", ".")
