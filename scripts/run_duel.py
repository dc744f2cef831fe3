#!/usr/bin/env python3
"""
Run a flagship duel.

Usage:
    python scripts/run_duel.py
    python scripts/run_duel.py --trials 50000 --you counter_fire --enemy hidden_flagship --verbose
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from flagship_duel.cli import main


if __name__ == "__main__":
    sys.exit(main())
