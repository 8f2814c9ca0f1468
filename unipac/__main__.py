"""
Allows running the CLI as: python -m unipac <args>
"""
import sys

from unipac.cli import main

if __name__ == '__main__':
    sys.exit(main())
