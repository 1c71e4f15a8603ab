"""Allow ``python -m nsp_segmenter``."""

import sys

from .cli import main

sys.exit(main())
