from .protocol import AssetStage

__all__ = ["AssetStage"]
