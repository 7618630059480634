"""Allow ``python -m console_snake``."""

import sys

from console_snake.cli import main

sys.exit(main())
