"""
Centralized Dashboard Configuration
Down GAA Senior Camogie - Sports Science Performance Dashboard
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from dotenv import load_dotenv


VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class DashboardConfig:
    """Centralized configuration for the performance dashboard"""

    # Directories
    DATA_DIR: str = 'data'
    LOG_DIR: str = 'logs'

    # Branding
    TEAM_NAME: str = 'Down GAA Senior Camogie'
    SUBTITLE: str = 'Sports Science Performance Dashboard'

    # Asymmetry parsing
    LEFT_MARKER: str = 'L'

    # Logging
    LOG_LEVEL: str = 'INFO'
    LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    LOG_MAX_BYTES: int = 10485760  # 10MB
    LOG_BACKUP_COUNT: int = 5

    @classmethod
    def from_env(cls, env_path: Optional[str] = None):
        """Load configuration from .env file"""
        env_locations = [
            env_path,
            '.env',
            'config/local_secrets/.env',
        ]

        for loc in env_locations:
            if loc and os.path.exists(loc):
                load_dotenv(loc)
                break

        return cls(
            DATA_DIR=os.getenv('CAMOGIE_DATA_DIR', cls.DATA_DIR),
            LOG_DIR=os.getenv('CAMOGIE_LOG_DIR', cls.LOG_DIR),
            TEAM_NAME=os.getenv('CAMOGIE_TEAM_NAME', cls.TEAM_NAME),
            LEFT_MARKER=os.getenv('CAMOGIE_LEFT_MARKER', cls.LEFT_MARKER),
            LOG_LEVEL=os.getenv('CAMOGIE_LOG_LEVEL', cls.LOG_LEVEL).upper(),
        )

    def validate(self) -> bool:
        """Validate required configuration"""
        required = ['DATA_DIR', 'LEFT_MARKER']
        missing = [f for f in required if not getattr(self, f)]

        if missing:
            raise ValueError(f"Missing required config: {', '.join(missing)}")

        if self.LOG_LEVEL not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.LOG_LEVEL}")

        return True

    def ensure_directories(self):
        """Create required directories if they don't exist"""
        os.makedirs(self.LOG_DIR, exist_ok=True)


# ============================================================================
# LOGGING SETUP
# ============================================================================

class DashboardLogger:
    """Structured logging with rotation"""

    def __init__(self, name: str = 'dashboard', config: Optional[DashboardConfig] = None):
        config = config or DashboardConfig()
        config.ensure_directories()

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()

        # Console handler
        console = logging.StreamHandler()
        console.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
        console.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))

        # File handler with rotation
        file_handler = RotatingFileHandler(
            os.path.join(config.LOG_DIR, f'dashboard_{datetime.now().strftime("%Y%m%d")}.log'),
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))

        self.logger.addHandler(console)
        self.logger.addHandler(file_handler)

    def get_logger(self):
        return self.logger


if __name__ == "__main__":
    config = DashboardConfig.from_env()
    config.validate()
    config.ensure_directories()

    print("Configuration loaded successfully!")
    print(f"Data directory: {config.DATA_DIR}")
    print(f"Log directory: {config.LOG_DIR}")
    print(f"Log level: {config.LOG_LEVEL}")
