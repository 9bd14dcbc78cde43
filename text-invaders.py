"""Launch Text Invaders: ``python text-invaders.py [OPTIONS]``."""

import sys

from main import main

if __name__ == "__main__":
    sys.exit(main())
