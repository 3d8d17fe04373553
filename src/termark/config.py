"""Configuration management for termark."""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from .renderer import DEFAULT_MAX_QUOTE_DEPTH

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Configuration for termark."""

    max_quote_depth: int = DEFAULT_MAX_QUOTE_DEPTH
    scroll_step: int = 1
    page_size: int = 20
    log_file: Optional[str] = None  # Logging is off unless a file is given
    log_level: str = "WARNING"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        config_dir = Path.home() / ".config" / "termark"
        return config_dir / "config.json"

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or create default."""
        config_path = cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    data = json.load(f)
                return cls(**data)
            except (json.JSONDecodeError, TypeError) as e:
                logger.warning(f"Could not load config: {e}. Using defaults.")
                return cls.default()
        else:
            config = cls.default()
            config.save()
            return config

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls()

    def save(self) -> None:
        """Save configuration to file."""
        config_path = self.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            json.dump(asdict(self), f, indent=2)

    def configure_logging(self) -> None:
        """Send log records to ``log_file``; the terminal belongs to the UI."""
        if not self.log_file:
            return
        logging.basicConfig(
            filename=str(Path(self.log_file).expanduser()),
            level=getattr(logging, self.log_level.upper(), logging.WARNING),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
