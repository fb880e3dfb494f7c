"""
Data loading and parsing module.

This package handles all file I/O, JSON parsing and the read-only catalog.
"""

from .catalog import ModuleCatalog
from .loader import DataLoader
from .parser import parse_module, parse_prereq_tree, parse_requirement, parse_curriculum

__all__ = [
    "ModuleCatalog",
    "DataLoader",
    "parse_module",
    "parse_prereq_tree",
    "parse_requirement",
    "parse_curriculum",
]
