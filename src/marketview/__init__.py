"""MarketView - asset view pipeline, price simulation and recommendations"""

__version__ = "0.1.0"
