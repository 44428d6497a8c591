"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use ZENAUI_ prefix (e.g., ZENAUI_STRICT_OPTIONS=false).

Settings can also be loaded from a .env file in the project root.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use ZENAUI_ prefix.

    Examples:
        ZENAUI_ID_PREFIX=zm
        ZENAUI_STRICT_OPTIONS=false
        ZENAUI_DEFAULT_THEME=admin
    """

    model_config = SettingsConfigDict(
        env_prefix="ZENAUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Renderer configuration
    id_prefix: str = Field(
        default="zu",
        description="Prefix for generated component instance ids (e.g., zu-alert-1)",
    )

    strict_options: bool = Field(
        default=True,
        description="Reject option values of the wrong type with InvalidOptionType "
        "instead of falling back to the declared default",
    )

    debug_mode: bool = Field(
        default=False,
        description="Annotate rendered fragments with data-component markers",
    )

    # Theme configuration
    default_theme: str = Field(
        default="default",
        description="Theme used when neither the page nor the CLI names one",
    )

    themes_dir: Optional[str] = Field(
        default=None,
        description="Directory containing theme folders. Defaults to the packaged themes/",
    )

    # Document configuration
    tailwind_src: str = Field(
        default="https://cdn.tailwindcss.com",
        description="Script URL for the Tailwind runtime injected into compiled pages",
    )

    alpine_src: str = Field(
        default="https://cdn.jsdelivr.net/npm/alpinejs@3.x.x/dist/cdn.min.js",
        description="Script URL for the Alpine.js runtime injected into compiled pages",
    )

    minify_output: bool = Field(
        default=False,
        description="Collapse blank lines between top-level fragments in compiled pages",
    )

    def instanceId_make(self, component: str, index: int) -> str:
        """
        Generate an opaque instance id for the n-th rendering of a component.

        Args:
            component: Component name (e.g., "alert")
            index: One-based instance counter within a render context

        Returns:
            Id string (e.g., "zu-alert-1")

        Example:
            >>> settings = AppSettings()
            >>> settings.instanceId_make('modal', 3)
            'zu-modal-3'
        """
        return f"{self.id_prefix}-{component.replace('_', '-')}-{index}"


# Singleton instance - import this in your code
appsettings = AppSettings()
