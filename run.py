#!/usr/bin/env python3
"""
Record store quick launcher.

Usage:
  python run.py best data.json                 # best record by attack
  python run.py best data.json --field defense # best record by defense
  python run.py list data.yaml                 # print every record
  python run.py run config.yaml                # drive everything from a config
  python run.py --help
"""

from console.cli import main

if __name__ == "__main__":
    main()
