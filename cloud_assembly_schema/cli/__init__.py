"""
Command-line interface for CLOUD_ASSEMBLY_SCHEMA.
"""

from .main import cli

__all__ = ["cli"]
