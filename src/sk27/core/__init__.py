"""Core components for the SK-27 landing page.

This package contains the non-UI building blocks:

- **LandingConfig**: Pydantic Settings configuration (``SK27_`` prefix)
- **ImageFetchAdapter**: Gemini image generation with silent degradation
- **content**: Static business content, links and image slot prompts
"""

from .config import LandingConfig, config
from .image_fetch import ExternalServiceUnavailable, ImageFetchAdapter, ImageRequest

__all__ = [
    "LandingConfig",
    "config",
    "ExternalServiceUnavailable",
    "ImageFetchAdapter",
    "ImageRequest",
]
