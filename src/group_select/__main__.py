"""Allow ``python -m group_select``."""

import sys

from .cli import main

sys.exit(main())
