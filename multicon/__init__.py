"""
multicon - N-player Connect-Four-style game

This package provides the MultiCon board and game engine, a Gymnasium
environment over the game, and a command-line interface for playing it.
"""

# Version number
__version__ = '0.1.0'
