"""Allows running the cipher tool via: python -m classical_cipher"""

import sys

from classical_cipher.cli import main

if __name__ == "__main__":
    sys.exit(main())
