"""Configuration helpers for the Wardrobe Stylist app."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_MATCH_THRESHOLD = 0.7
DEFAULT_ACCESSORY_THRESHOLD = 0.7
DEFAULT_COLOR_MATCH_DISTANCE = 150.0
DEFAULT_MIN_FILTERED_ITEMS = 3
DEFAULT_RECOMMENDATION_COUNT = 3


@dataclass
class StylistConfig:
    """Tunable thresholds for the recommendation engine.

    The defaults reproduce the stock behaviour; environments override them
    through environment variables or a small ``key: value`` file.
    """

    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    accessory_threshold: float = DEFAULT_ACCESSORY_THRESHOLD
    color_match_distance: float = DEFAULT_COLOR_MATCH_DISTANCE
    min_filtered_items: int = DEFAULT_MIN_FILTERED_ITEMS
    default_recommendation_count: int = DEFAULT_RECOMMENDATION_COUNT
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    environment: str | None = None

    def __post_init__(self) -> None:
        for name in ("match_threshold", "accessory_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.color_match_distance < 0:
            raise ValueError("color_match_distance must not be negative")
        if self.min_filtered_items < 0 or self.default_recommendation_count < 0:
            raise ValueError("item counts must not be negative")

    @classmethod
    def from_env(cls) -> "StylistConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default; environment variables (upper-cased keys) win over the file.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("STYLIST_CONFIG_DIR", "config/environments"))
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

        def get_number(key: str, default: float, cast=float):
            raw = get_value(key)
            if raw in (None, ""):
                return default
            try:
                return cast(raw)
            except ValueError as exc:
                raise ValueError(f"Invalid value for {key}: {raw!r}") from exc

        seed = get_value("random_seed")
        return cls(
            match_threshold=get_number("match_threshold", DEFAULT_MATCH_THRESHOLD),
            accessory_threshold=get_number("accessory_threshold", DEFAULT_ACCESSORY_THRESHOLD),
            color_match_distance=get_number("color_match_distance", DEFAULT_COLOR_MATCH_DISTANCE),
            min_filtered_items=get_number("min_filtered_items", DEFAULT_MIN_FILTERED_ITEMS, int),
            default_recommendation_count=get_number(
                "default_recommendation_count", DEFAULT_RECOMMENDATION_COUNT, int
            ),
            random_seed=int(seed) if seed not in (None, "") else None,
            log_level=str(get_value("log_level", "INFO") or "INFO").upper(),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#") or ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
