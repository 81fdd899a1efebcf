#!/usr/bin/env python3
"""
hs-order-cli entry script.

Runs the order CLI from a source checkout without installing it.

Usage:
    python cli.py --help
    python cli.py 1234567890123456789 --query
    python cli.py 1234567890123456789 --mode wild --pwd abcd
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from hs_order.cli.app import app

if __name__ == "__main__":
    app()
