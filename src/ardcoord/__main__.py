"""Allow ``python -m ardcoord``."""

import sys

from ardcoord.cli import main

sys.exit(main())
