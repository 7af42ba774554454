"""Configuration helpers for the outfit scoring engine."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_SERVICE_NAME = "outfit-scoring-engine"
DEFAULT_MAX_WORKERS = 4


@dataclass
class EngineConfig:
    """Configuration values for the scoring engine.

    The scoring functions themselves are pure and take no configuration; these
    values only shape the facade around them (logging, worker pool size and the
    service name stamped on the log events the facade emits).
    """

    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = "INFO"
    max_workers: int = DEFAULT_MAX_WORKERS
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables, which take precedence.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("ENGINE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        service_name = get_value("service_name", DEFAULT_SERVICE_NAME)
        log_level = get_value("log_level", "INFO")
        max_workers = get_value("max_workers", str(DEFAULT_MAX_WORKERS))

        return cls(
            service_name=str(service_name or DEFAULT_SERVICE_NAME),
            log_level=str(log_level or "INFO").upper(),
            max_workers=int(max_workers or DEFAULT_MAX_WORKERS),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
