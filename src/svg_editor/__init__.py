"""SVG editor packages module.

This module provides the package and project directory paths.
"""

from pathlib import Path

THIS_DIR = Path(__file__).parent
PROJECT_DIR = (THIS_DIR / "../..").resolve()
