"""
Terminal services: the render/input shell the game loop draws through.
"""

from .shell import Shell, QUIT

__all__ = [
    'Shell',
    'QUIT',
]
