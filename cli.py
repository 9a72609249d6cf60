#!/usr/bin/env python3
"""
Convenience shim for 'python cli.py'.

Installed environments should use the 'slotgrid' command or
'python -m slotgrid' instead.
"""
import sys

if __name__ == "__main__":
    from slotgrid.cli import main
    sys.exit(main())
