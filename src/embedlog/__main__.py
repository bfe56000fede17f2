"""Allow ``python -m embedlog``."""

import sys

from embedlog.cli import main

sys.exit(main())
