"""Allow ``python -m cobalt``."""

import sys

from cobalt.cli import main

sys.exit(main())
