"""Energy-aware task allocation and refuelling for a fleet of UAVs."""

__version__ = "0.1.0"
__all__ = ["cli", "scheduler", "task", "uav"]