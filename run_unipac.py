#!/usr/bin/env python3
"""
Entry point script for the unipac CLI.
This allows running commands as: python run_unipac.py <args>
"""
import sys
from unipac.cli import main

if __name__ == '__main__':
    sys.exit(main())
