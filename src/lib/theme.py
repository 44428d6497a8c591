"""
Theme loader for zenaui pages and components.

Themes restyle components without touching their declarations. Each theme
is a directory containing:
  - theme.yaml: variant table overrides and document settings
  - theme.css: Optional extra CSS copied next to compiled pages

theme.yaml layout:

    document:
      body_class: "bg-gray-50 text-gray-900"
      dark_class: "dark bg-gray-900 text-gray-100"
    variants:
      alert.type:
        error: "bg-red-50 border-red-400 text-red-800"
      button.variant:
        primary: "bg-red-600 hover:bg-red-700 text-white"
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional


class ThemeError(Exception):
    """Raised when theme loading or validation fails"""
    pass


def themesDir_default() -> Path:
    """Theme directory from ZENAUI_THEMES_DIR, else the packaged themes/"""
    from ..config import appsettings

    if appsettings.themes_dir:
        return Path(appsettings.themes_dir)
    return Path(__file__).parent.parent / "themes"


class Theme:
    """
    Represents a zenaui theme.

    A theme consists of:
      - Configuration (variant overrides, document classes) from theme.yaml
      - Optional CSS from theme.css
    """

    def __init__(self, theme_name: str, themes_dir: Optional[str] = None):
        """
        Load a theme by name.

        Args:
            theme_name: Name of the theme directory (e.g., "default", "admin")
            themes_dir: Path to themes directory (default: packaged themes)

        Raises:
            ThemeError: If theme directory or theme.yaml don't exist, or the
                        YAML is malformed
        """
        self.name = theme_name
        self.themes_dir = Path(themes_dir) if themes_dir else themesDir_default()
        self.theme_dir = self.themes_dir / theme_name

        if not self.theme_dir.is_dir():
            raise ThemeError(
                f"Theme '{theme_name}' not found. "
                f"Expected directory: {self.theme_dir}"
            )

        self.config_path = self.theme_dir / "theme.yaml"
        if not self.config_path.exists():
            raise ThemeError(f"Theme '{theme_name}' missing theme.yaml")

        self.config = self._config_load()
        self.css_path = self.theme_dir / "theme.css"

    def _config_load(self) -> Dict[str, Any]:
        """Load and parse theme.yaml"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ThemeError(f"Failed to parse theme.yaml of '{self.name}': {e}")
        except OSError as e:
            raise ThemeError(f"Failed to load theme.yaml of '{self.name}': {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ThemeError(f"theme.yaml of '{self.name}' must be a mapping")
        return config

    def css_has(self) -> bool:
        """Check if theme has custom CSS file"""
        return self.css_path.exists()

    def cssPath_get(self) -> Optional[Path]:
        """Get path to theme CSS file, or None if doesn't exist"""
        return self.css_path if self.css_has() else None

    def config_get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from theme.yaml.

        Supports nested keys with dot notation:
          theme.config_get('document.body_class', '')
        """
        value: Any = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def variantOverrides_get(self, table_name: str) -> Optional[Mapping[str, Any]]:
        """
        Variant entries this theme overrides for a table.

        Table names contain dots ("alert.type"), so they are looked up as
        whole keys under `variants`, not as dotted paths.
        """
        variants = self.config.get('variants') or {}
        overrides = variants.get(table_name) if isinstance(variants, dict) else None
        return overrides if isinstance(overrides, dict) else None

    def bodyClass_get(self, dark: bool = False) -> str:
        """Class attribute for the compiled page's <body>"""
        if dark:
            return self.config_get('document.dark_class', 'dark bg-gray-900 text-gray-100')
        return self.config_get('document.body_class', 'bg-gray-50 text-gray-900')

    def __repr__(self) -> str:
        return f"Theme(name='{self.name}', path='{self.theme_dir}')"


def themes_listAvailable(themes_dir: Optional[str] = None) -> list[str]:
    """
    List all available theme names.

    Returns:
        Sorted names of directories that contain a theme.yaml
    """
    themes_path = Path(themes_dir) if themes_dir else themesDir_default()

    if not themes_path.exists():
        return []

    return sorted(
        item.name for item in themes_path.iterdir()
        if item.is_dir() and (item / "theme.yaml").exists()
    )


def theme_validate(theme_name: str, themes_dir: Optional[str] = None) -> tuple[bool, str]:
    """
    Validate a theme's structure and configuration.

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        theme = Theme(theme_name, themes_dir)
    except ThemeError as e:
        return False, str(e)

    variants = theme.config.get('variants', {})
    if variants is not None and not isinstance(variants, dict):
        return False, f"Theme '{theme_name}': 'variants' must be a mapping of table name to entries"

    for table_name, entries in (variants or {}).items():
        if not isinstance(entries, dict):
            return False, f"Theme '{theme_name}': variant table '{table_name}' must be a mapping"

    return True, f"Theme '{theme_name}' is valid"
