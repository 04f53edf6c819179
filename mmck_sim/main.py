#!/usr/bin/env python3
"""Main entry point for the M/M/c/K simulation package."""

import sys

from mmck_sim.scripts.run_simulation import main

if __name__ == '__main__':
    sys.exit(main())
