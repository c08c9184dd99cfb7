"""
                GrubDash API

A small REST backend for a food delivery service: dishes on the
menu and the orders placed against them, kept in memory for the
lifetime of the process.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
