"""Entry point for running the sequencer from a checkout.

Usage:
    python scripts/run_schedule.py input.txt --workers 5 --delay 60
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sequencer.cli import main


if __name__ == "__main__":
    sys.exit(main())
