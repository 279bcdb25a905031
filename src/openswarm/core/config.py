"""
Configuration management for OpenSwarm.
"""

import os
import yaml
import logging
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, asdict
from pathlib import Path

from openswarm.core.types import VelocityUpdateType, BestTracking, TerminationCriterion
from openswarm.models.optimization import ConfigurationError


logger = logging.getLogger(__name__)


@dataclass
class PSOConfig:
    """Hyperparameters for Particle Swarm Optimization."""
    swarm_size: int = 10
    inertia_weight: float = 0.9
    cognitive_acceleration: float = 0.5
    social_acceleration: float = 0.3
    max_iterations: int = 200  # 0 means no limit
    tolerance: float = 1e-5

    velocity_update: str = VelocityUpdateType.INERTIA_WEIGHT.value
    best_tracking: str = BestTracking.PER_PARTICLE.value
    termination: str = TerminationCriterion.GLOBAL_BEST.value

    # Upper bound on iterations when max_iterations is 0
    max_unbounded_iterations: int = 100000

    seed: Optional[int] = None
    record_history: bool = True

    def validate(self):
        """Reject hyperparameters that cannot produce a valid run."""
        if self.swarm_size < 1:
            raise ConfigurationError(
                f"swarm_size must be at least 1, got {self.swarm_size}",
                details={"swarm_size": self.swarm_size}
            )

        if self.tolerance < 0:
            raise ConfigurationError(
                f"tolerance must be non-negative, got {self.tolerance}",
                details={"tolerance": self.tolerance}
            )

        if self.max_iterations < 0:
            raise ConfigurationError(
                f"max_iterations must be non-negative, got {self.max_iterations}",
                details={"max_iterations": self.max_iterations}
            )

        if self.max_unbounded_iterations <= 0:
            raise ConfigurationError(
                "max_unbounded_iterations must be positive",
                details={"max_unbounded_iterations": self.max_unbounded_iterations}
            )

        for name, enum_type in (
            ("velocity_update", VelocityUpdateType),
            ("best_tracking", BestTracking),
            ("termination", TerminationCriterion),
        ):
            value = getattr(self, name)
            try:
                enum_type(value)
            except ValueError:
                allowed = [member.value for member in enum_type]
                raise ConfigurationError(
                    f"Unknown {name} '{value}', expected one of {allowed}",
                    details={name: value}
                ) from None

    @property
    def best_tracking_mode(self) -> BestTracking:
        return BestTracking(self.best_tracking)

    @property
    def termination_criterion(self) -> TerminationCriterion:
        return TerminationCriterion(self.termination)


@dataclass
class Config:
    """Main configuration class for OpenSwarm."""

    pso: PSOConfig = field(default_factory=PSOConfig)

    # Environment settings
    environment: str = field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found, using defaults")
            return cls()

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                logger.warning("Empty config file, using defaults")
                return cls()

            pso_config = PSOConfig(**config_data.get("pso", {}))

            main_config = {
                k: v for k, v in config_data.items()
                if k != "pso"
            }

            return cls(pso=pso_config, **main_config)

        except Exception as e:
            logger.error(f"Failed to load config from {config_path}: {e}")
            logger.info("Using default configuration")
            return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_file(self, config_path: Union[str, Path]):
        """Save configuration to YAML file."""
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_path, 'w') as f:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, indent=2)

            logger.info(f"Configuration saved to {config_path}")

        except Exception as e:
            logger.error(f"Failed to save config to {config_path}: {e}")
            raise

    def update_from_env(self):
        """Update configuration from environment variables."""
        env_mappings = {
            "OPENSWARM_SWARM_SIZE": ("pso.swarm_size", int),
            "OPENSWARM_INERTIA_WEIGHT": ("pso.inertia_weight", float),
            "OPENSWARM_COGNITIVE_ACCELERATION": ("pso.cognitive_acceleration", float),
            "OPENSWARM_SOCIAL_ACCELERATION": ("pso.social_acceleration", float),
            "OPENSWARM_MAX_ITERATIONS": ("pso.max_iterations", int),
            "OPENSWARM_TOLERANCE": ("pso.tolerance", float),
            "OPENSWARM_VELOCITY_UPDATE": "pso.velocity_update",
            "OPENSWARM_BEST_TRACKING": "pso.best_tracking",
            "OPENSWARM_TERMINATION": "pso.termination",
            "OPENSWARM_MAX_UNBOUNDED_ITERATIONS": ("pso.max_unbounded_iterations", int),
            "OPENSWARM_SEED": ("pso.seed", int),
            "OPENSWARM_LOG_LEVEL": "log_level",
        }

        for env_var, config_path in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                try:
                    if isinstance(config_path, tuple):
                        attr_path, converter = config_path
                        value = converter(value)
                    else:
                        attr_path = config_path

                    # Handle nested attributes
                    if "." in attr_path:
                        obj_name, attr_name = attr_path.split(".", 1)
                        obj = getattr(self, obj_name)
                        setattr(obj, attr_name, value)
                    else:
                        setattr(self, attr_path, value)

                    logger.info(f"Updated {attr_path} from environment variable {env_var}")

                except ValueError as e:
                    logger.error(f"Failed to set {config_path} from {env_var}: {e}")


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from file or environment.

    Args:
        config_path: Path to configuration file (optional)

    Returns:
        Loaded configuration object
    """
    if config_path:
        config = Config.from_file(config_path)
    else:
        # Look for config file in standard locations
        possible_paths = [
            "openswarm.yaml",
            "config/openswarm.yaml",
            os.path.expanduser("~/.openswarm/config.yaml"),
        ]

        config = None
        for path in possible_paths:
            if os.path.exists(path):
                config = Config.from_file(path)
                break

        if config is None:
            config = Config()

    # Update from environment variables
    config.update_from_env()

    return config


def configure_logging(level: str = "INFO", format_string: Optional[str] = None):
    """Configure logging for OpenSwarm components."""
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    logging.getLogger("openswarm").setLevel(getattr(logging, level.upper(), logging.INFO))
