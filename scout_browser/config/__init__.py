"""
Config package for scout_browser.

Responsible for:
- the Configuration model
- loading it from JSON / environment
"""

from .model import Configuration
from .io import load_configuration

__all__ = ["Configuration", "load_configuration"]
