"""
Discovery module.

Builds type descriptors from live Python classes and modules.
"""

from . import all_classes
from .describer import TypeDescriber, is_interface
from .policy import DiscoveryPolicy

__all__ = [
    "all_classes",
    "TypeDescriber",
    "DiscoveryPolicy",
    "is_interface",
]
