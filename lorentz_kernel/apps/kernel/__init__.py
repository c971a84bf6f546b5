"""
Kernel application package.

Contains the command-line entrypoint for the Lorentz-group kernel.
"""

from .main import main, load_config

__all__ = ['main', 'load_config']
