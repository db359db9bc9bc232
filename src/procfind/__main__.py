"""Allow running procfind with python -m procfind."""

import sys

from procfind.cli import main

sys.exit(main())
