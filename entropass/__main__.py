"""Allow running as `python -m entropass`."""

import sys

from entropass.cli import main

sys.exit(main())
