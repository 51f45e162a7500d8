"""SK-27 Gym - one-page landing site with generated decorative imagery."""

__version__ = "0.1.0"

__all__ = ["__version__"]
