# conftest.py — ddo_plot package
#
# Ensures that the repository root is on sys.path when pytest is invoked from
# any directory, so "from ddo_plot.x import ..." resolves without requiring
# a package install.
#
# Usage:
#   pytest ddo_plot/tests/ -v
#   pytest ddo_plot/tests/test_parser.py -v

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
