"""Run countwords as python -m countwords."""

import sys

from .cli import main

sys.exit(main())
