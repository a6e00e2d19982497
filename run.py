#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four console game

Usage:
    python run.py play --player1 Ann --player2 Bob
    python run.py show --moves 3,3,4,4,5,5,6
    python run.py --debug benchmark --iterations 500
"""

import sys

from c4engine.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
