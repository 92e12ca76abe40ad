"""
Quadra CLI - Command-line interface for rectangle queries.

Usage:
    quadra-cli compare --first 5 5 5 5 --second 10 5 5 5
    quadra-cli adjacency --first 5 5 5 10 --second 10 7 5 5
"""

from .cli import main

__all__ = ['main']
