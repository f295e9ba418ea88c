"""Allow ``python -m keylights``."""
import sys

from keylights.cli import main

sys.exit(main())
