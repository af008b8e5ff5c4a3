"""
Configuration Management for SessionCounter

🔧 Environment-aware configuration:
Dataclass sections for the web server, the session cookie, the live timer
stream and logging, resolved from an environment preset and then overridden
from ``SESSIONCOUNTER_*`` environment variables.
"""

import logging
import logging.handlers
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_STATIC_DIR = PACKAGE_DIR / "public"
ENV_PREFIX = "SESSIONCOUNTER_"

# One year: effectively "forever" for a browser tab.
ONE_YEAR = 365 * 24 * 60 * 60


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class WebConfig:
    """Web server configuration"""
    host: str = "0.0.0.0"
    port: int = 3000
    live: bool = True
    debug: bool = False
    auto_reload: bool = False
    static_dir: Path = DEFAULT_STATIC_DIR
    static_prefix: str = "/public"

    @property
    def stylesheet_url(self) -> str:
        return f"{self.static_prefix.rstrip('/')}/style.css"


@dataclass
class SessionConfig:
    """Session cookie configuration"""
    secret_key: Optional[str] = None
    key_file: str = ".sesskey"
    cookie_name: str = "session_"
    max_age: Optional[int] = None  # None = browser-session cookie
    https_only: bool = False
    same_site: str = "lax"


@dataclass
class TimerConfig:
    """Live timer stream configuration"""
    interval: float = 1.0
    event: str = "timer"
    keep_alive: int = ONE_YEAR


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT

    web: WebConfig = field(default_factory=WebConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    timer: TimerConfig = field(default_factory=TimerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> "ApplicationConfig":
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.web.debug = True
            config.web.auto_reload = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.session.secret_key = "testing-secret-key"
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.web.debug = False
            config.web.auto_reload = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ApplicationConfig":
        """Create configuration from a dictionary shaped like ``to_dict()``"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        for section in ("web", "session", "timer", "logging"):
            target = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if not hasattr(target, key):
                    raise ValueError(f"Unknown {section} setting: {key!r}")
                if key == "static_dir":
                    value = Path(value)
                setattr(target, key, value)

        return config

    @classmethod
    def from_environment(cls, environ: Optional[Dict[str, str]] = None) -> "ApplicationConfig":
        """Create configuration from environment variables"""
        environ = os.environ if environ is None else environ

        def env(name: str) -> Optional[str]:
            return environ.get(ENV_PREFIX + name)

        config = cls.for_environment(Environment(env("ENV") or "development"))

        if env("HOST"):
            config.web.host = env("HOST")
        if env("PORT"):
            try:
                config.web.port = int(env("PORT"))
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {env('PORT')!r}") from None
        if env("LIVE"):
            config.web.live = _parse_bool(env("LIVE"))
        if env("STATIC_DIR"):
            config.web.static_dir = Path(env("STATIC_DIR"))
        if env("SECRET_KEY"):
            config.session.secret_key = env("SECRET_KEY")
        if env("LOG_LEVEL"):
            config.logging.level = env("LOG_LEVEL").upper()
        if env("LOG_FILE"):
            config.logging.file_path = env("LOG_FILE")

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "web": {
                "host": self.web.host,
                "port": self.web.port,
                "live": self.web.live,
                "debug": self.web.debug,
                "auto_reload": self.web.auto_reload,
                "static_dir": str(self.web.static_dir),
                "static_prefix": self.web.static_prefix,
            },
            "session": {
                "key_file": self.session.key_file,
                "cookie_name": self.session.cookie_name,
                "max_age": self.session.max_age,
                "https_only": self.session.https_only,
                "same_site": self.session.same_site,
            },
            "timer": {
                "interval": self.timer.interval,
                "event": self.timer.event,
                "keep_alive": self.timer.keep_alive,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count,
            },
        }


def _parse_bool(value: Union[str, bool]) -> bool:
    if isinstance(value, bool):
        return value
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"Not a boolean value: {value!r}")


def configure_logging(config: LoggingConfig) -> None:
    """Install handlers on the ``sessioncounter`` logger."""
    logger = logging.getLogger("sessioncounter")
    logger.setLevel(config.level)
    formatter = logging.Formatter(config.format)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler()]
    if config.file_path:
        handlers.append(logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)


# Global configuration management
_current_config: Optional[ApplicationConfig] = None


def set_config(config: ApplicationConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config


def get_config() -> ApplicationConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        _current_config = ApplicationConfig.from_environment()

    return _current_config


__all__ = [
    "ApplicationConfig", "Environment", "WebConfig", "SessionConfig",
    "TimerConfig", "LoggingConfig", "ONE_YEAR",
    "configure_logging", "set_config", "get_config",
]
