"""Shell utilities: PATH cleaning and filesystem watching."""

from shell_utils.path import clean_path

__version__ = "0.3.0"

__all__ = ["__version__", "clean_path"]
