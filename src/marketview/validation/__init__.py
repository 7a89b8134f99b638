"""Dataset validation models"""

from .assets import AssetRecord

__all__ = ["AssetRecord"]
