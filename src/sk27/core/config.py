"""Configuration management for the SK-27 landing page.

This module provides centralized configuration using Pydantic Settings.
Values are loaded from environment variables with the ``SK27_`` prefix,
so deployments can be tuned without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (``SK27_*`` prefix)
2. ``.env`` file in the project root
3. Default values defined in :class:`LandingConfig`

The image-service credential is the one exception to the prefix rule.  It
is read from ``SK27_API_KEY``, ``GEMINI_API_KEY`` or ``API_KEY``, in that
order, so the key provisioned for other Gemini tooling can be reused.

Example .env file::

    SK27_API_KEY=your-gemini-key
    SK27_SPLASH_DURATION_MS=1200
    SK27_SERVER_PORT=8080

Global Configuration Instance
------------------------------
A global ``config`` instance is created at module import time and is the
single source of truth across the application::

    from sk27.core.config import config

    print(config.image_model)
    print(config.splash_duration_ms)
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class LandingConfig(BaseSettings):
    """Main configuration for the SK-27 landing page.

    Attributes
    ----------
    Image Service:
        api_key : SecretStr | None
            Gemini API credential.  When missing, every image fetch degrades
            to the unavailable fallback.
        image_model : str
            Gemini model used for image generation.

    Page Timings:
        splash_duration_ms : int
            How long the splash stays up before the sections are shown.
        reveal_settle_ms : int
            Extra delay after the splash before reveal observation starts,
            so layout can settle before positions are measured.
        reveal_threshold : float
            Fraction of a target's area that must be in the viewport for it
            to count as entered.
        navbar_scroll_offset : int
            Scroll offset (px) past which the navbar switches to its glass style.

    Paths:
        static_dir : Path
            Directory holding ``css/`` and ``js/`` assets.

    Server:
        server_host : str
            Bind address for uvicorn.
        server_port : int
            Port for uvicorn (1024-65535).
        log_level : str
            Root logging level used by the ``sk27`` entry point.

    Examples
    --------
    Create a custom configuration:

        >>> custom = LandingConfig(splash_duration_ms=0, reveal_settle_ms=0)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SK27_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Image service
    api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("SK27_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Credential for the Gemini image service",
    )
    image_model: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for decorative image generation",
    )

    # Page timings
    splash_duration_ms: int = Field(
        default=1200,
        description="Splash screen duration before the sections are shown",
        ge=0,
    )
    reveal_settle_ms: int = Field(
        default=150,
        description="Delay after the splash before reveal observation starts",
        ge=0,
    )
    reveal_threshold: float = Field(
        default=0.1,
        description="Visible area fraction that counts as entering the viewport",
        gt=0.0,
        le=1.0,
    )
    navbar_scroll_offset: int = Field(
        default=50,
        description="Scroll offset past which the navbar turns opaque",
        ge=0,
    )

    # Paths
    static_dir: Path = Field(
        default=_PACKAGE_DIR / "static",
        description="Directory with the css/ and js/ assets",
    )

    # Server
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=8080,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the server process",
    )


# Global configuration instance, loaded from SK27_* variables and .env.
config = LandingConfig()
