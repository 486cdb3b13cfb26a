#!/usr/bin/env python3
"""
inputkit main entry point for running as a module: python3 -m inputkit
"""

import sys
from inputkit.cli import main

if __name__ == '__main__':
    sys.exit(main())
