"""``python -m pigsfly`` entry point."""

import sys

from pigsfly.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
