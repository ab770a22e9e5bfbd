import os
import logging
import yaml
from pydantic import BaseModel, Field
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent.parent
CONFIG_PATH = BASE_DIR / "config.yaml"

class Settings(BaseModel):
    # Page
    page_title: str = Field(default="Job Application Tracker", description="Browser tab title")
    page_icon: str = "💼"

    # Display
    date_format: str = Field(default="%m/%d/%Y", description="strftime format for dates on cards")
    cards_per_row: int = Field(default=3, ge=1, le=6)
    show_status_chart: bool = True

    # Logging
    base_dir: Path = BASE_DIR
    log_file: Path = Field(
        default_factory=lambda: Path(os.getenv("JOB_TRACKER_LOG_FILE", str(BASE_DIR / "job_tracker.log")))
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def load(cls, config_path: Path = CONFIG_PATH) -> "Settings":
        """Loads configuration from yaml and overrides with env vars."""
        config_data = {}

        # Load YAML
        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_data = yaml.safe_load(f)
                    if yaml_data:
                        config_data.update(yaml_data)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Could not load {config_path.name}: {e}")

        settings = cls(**config_data)

        # Explicit env overrides win over the yaml file
        if os.getenv("LOG_LEVEL"):
            settings.log_level = os.getenv("LOG_LEVEL")
        if os.getenv("JOB_TRACKER_LOG_FILE"):
            settings.log_file = Path(os.getenv("JOB_TRACKER_LOG_FILE"))

        return settings

# Global settings instance
settings = Settings.load()
