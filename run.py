#!/usr/bin/env python
"""
Fitness program CLI runner.

Usage:
    python run.py profile save ...  # create or replace the user profile
    python run.py profile show      # show the saved profile
    python run.py plan [--day N]    # show the 30-day workout plan
    python run.py log N --completed --minutes 45
    python run.py status N          # show the recorded workout for a day
    python run.py summary           # show fitness metrics
    python run.py visualize         # generate progress charts
"""

import sys
from pathlib import Path

# add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from fitness_program.main import main

if __name__ == "__main__":
    main()
