"""Configuration persistence manager for the Pixel Canvas app.

This module handles loading and saving of user settings to/from JSON files.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, ArtConfig


class ConfigManager:
    """Handles loading and saving of art configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.pixelcanvas_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> ArtConfig:
        """Load configuration from file, returning defaults if not found.

        Returns:
            ArtConfig with loaded or default values
        """
        config = ArtConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                # Update config with loaded values (fallback to defaults)
                for field in fields(ArtConfig):
                    if field.name in data:
                        setattr(config, field.name, data[field.name])
                print(f"✓ Loaded configuration from {self.config_path}")
        except (OSError, json.JSONDecodeError, TypeError) as e:
            print(f"Warning: Could not load config file: {e}")
            config = ArtConfig()

        return config

    def save(self, config: ArtConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: ArtConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)
