"""
Coup: a turn-based bluffing card game engine driven by text commands.
"""

__version__ = "0.1.0"
