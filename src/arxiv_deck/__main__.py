"""Allow ``python -m arxiv_deck``."""

import sys

from arxiv_deck.app import main

sys.exit(main())
