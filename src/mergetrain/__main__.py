"""Allow ``python -m mergetrain``."""

import sys

from mergetrain.cli import main

if __name__ == "__main__":
	sys.exit(main())
