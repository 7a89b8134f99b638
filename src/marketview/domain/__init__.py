"""Domain layer: asset models and pipeline stage protocol"""
