"""
shortcode_platform package initializer.
"""

from . import exceptions
from . import generator
from . import storage

__all__ = ["exceptions", "generator", "storage"]
