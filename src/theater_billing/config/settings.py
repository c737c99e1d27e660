"""
Centralized settings and path configuration for theater billing.
"""
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from ..engine.currency import CurrencyFormat, USD


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    # Walk up from this file to find the project root
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path
    data_dir: Path

    # Input files
    plays_csv: Path
    invoices_json: Path

    # Display
    currency: CurrencyFormat = USD

    @classmethod
    def load(cls, project_root: Optional[Path] = None, data_dir: Optional[Path] = None) -> 'Settings':
        """Load settings from the project structure."""
        root = project_root or get_project_root()
        # Bundled sample data ships inside the package
        data = data_dir or Path(__file__).resolve().parent.parent / 'data'

        return cls(
            project_root=root,
            data_dir=data,
            plays_csv=data / 'plays.csv',
            invoices_json=data / 'invoices.json',
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
