"""Initial dataset loading"""

from .loader import load_assets, parse_records

__all__ = ["load_assets", "parse_records"]
