"""Allow ``python -m lexicon``."""

import sys

from lexicon.cli import main

sys.exit(main())
