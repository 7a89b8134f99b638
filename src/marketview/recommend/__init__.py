from .similar import similar_assets

__all__ = ["similar_assets"]
