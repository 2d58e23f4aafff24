"""Allow running as ``python -m fmv2fm2``."""

import sys

from fmv2fm2.cli import main

sys.exit(main())
