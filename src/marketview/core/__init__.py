from .config import Config, SimulationConfig

__all__ = ["Config", "SimulationConfig"]
