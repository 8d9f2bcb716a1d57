"""Command-line interface module for Print Schema documents.

This module provides CLI tools for inspecting documents, rewriting them in
canonical form and listing the options a printer offers.
"""

from .main import main

__all__ = ["main"]
