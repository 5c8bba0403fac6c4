"""Common literal values used across linkpage.

These constants keep the default theme table, icon asset names, and output
paths centralized so the compiler, the batch builder, and tests import the
same values without drifting. The tables are read-only mappings; changing a
default here is a versioned behaviour change of the generated pages.

Examples
--------
>>> from linkpage import _constants
>>> _constants.DEFAULT_THEME["--spacing-large"]
'24px'
>>> _constants.OUTPUT_FILENAME_TEMPLATE.format(stem="index")
'index.html'
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

DEFAULT_THEME = MappingProxyType(
    {
        "--font-size-small": "1.3em",
        "--font-size-large": "2em",
        "--spacing-xs": "4px",
        "--spacing-small": "12px",
        "--spacing-medium": "16px",
        "--spacing-large": "24px",
        "--spacing-xl": "10vh",
        "--font-family-primary": "Inter, sans-serif",
        "--theme-background-main": "#faddf2",
        "--theme-background-link-btn": "#f4aed1",
        "--theme-copy-btn-hover": "#ffffff3b",
        "--theme-color-main": "#000000",
        "--theme-color-link-btn": "#000000",
        "--copy-btn-size": "20px",
        "--logo-size": "",
    }
)

ASSET_DIRNAME = "img"
COPY_ICON = "copy.png"
CLIPBOARD_ICON = "clipboard.png"
DEFAULT_ICON_ASSETS = (CLIPBOARD_ICON, COPY_ICON)

DEFAULT_ICON_PATHS = MappingProxyType(
    {
        "copy": f"./{ASSET_DIRNAME}/{COPY_ICON}",
        "clipboard": f"./{ASSET_DIRNAME}/{CLIPBOARD_ICON}",
    }
)
LOGO_PATH = f"./{ASSET_DIRNAME}/logo.png"
FAVICON_PATH = f"./{ASSET_DIRNAME}/favicon.png"

DESCRIPTOR_SUFFIX = ".xml"
OUTPUT_FILENAME_TEMPLATE = "{stem}.html"
STARTER_DESCRIPTOR = "index.xml"
SETTINGS_FILENAME = "linkpage.yaml"

PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
ASSETS_DIR = PACKAGE_DIR / "assets"
