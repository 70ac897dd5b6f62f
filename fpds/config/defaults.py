"""Default configuration parameters for fpds."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StructureParams:
    """Behaviour of list operations on empty or exhausted input."""
    strict_empty: bool = False          # Raise instead of degrading to EMPTY


@dataclass(frozen=True)
class LoggingParams:
    """structlog output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class DemoParams:
    """Sample values used by the demonstration entry point."""
    sample_list: tuple[int, ...] = (1, 2, 3, 4, 5)
    drop_count: int = 2
    drop_while_below: int = 4           # drop_while(x < drop_while_below)
    head_value: int = 4                 # set_head replacement
    zip_with_list: tuple[int, ...] = (10, 20)


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    structures: StructureParams
    logging: LoggingParams
    demo: DemoParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        structures=StructureParams(),
        logging=LoggingParams(),
        demo=DemoParams(),
    )
