"""
Console Module

Configuration and command line entry point.

This module provides:
- YAML-based configuration loading
- Logging setup
- CLI for loading data files and querying the best record
- New-record announcement hook
"""

__version__ = "0.1.0"
