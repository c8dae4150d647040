"""
tdd-primer

Small, fully tested utilities used as worked examples when practising
test-driven development, stubbing and dependency injection:

- shapes: one factory per shape kind producing immutable ShapeDescription
  records, plus a registry dispatching on the shape kind
- text: DelimitedJoiner, placing a delimiter strictly between elements
- greeting: GreetingPrinter, writing to an injected output sink
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tddprimer.config import PrimerConfig, load_config
from tddprimer.exceptions import (
    ConfigError,
    InvalidArgumentError,
    TDDPrimerError,
    UnknownShapeKindError,
)
from tddprimer.greeting import GreetingPrinter
from tddprimer.observability import configure_logging, get_logger
from tddprimer.shapes import (
    CircleFactory,
    ShapeDescription,
    ShapeFactory,
    ShapeFactoryRegistry,
    ShapeKind,
    SquareFactory,
    create_circle,
    create_square,
    default_registry,
)
from tddprimer.text import DelimitedJoiner

__version__ = "0.1.0"


def bootstrap(config_path: Optional[Path | str] = None) -> PrimerConfig:
    """
    Load configuration and configure logging from it.

    Scripts call this once at startup; library code never calls it.
    """

    config = load_config(config_path)
    configure_logging(level=config.logging.level, format=config.logging.format)
    get_logger(__name__).debug(
        "tddprimer_bootstrapped",
        log_format=config.logging.format,
        delimiter=config.joiner.delimiter,
    )
    return config


__all__ = [
    "__version__",
    "bootstrap",
    # Shapes
    "ShapeKind",
    "ShapeDescription",
    "ShapeFactory",
    "CircleFactory",
    "SquareFactory",
    "create_circle",
    "create_square",
    "ShapeFactoryRegistry",
    "default_registry",
    # Text / greeting
    "DelimitedJoiner",
    "GreetingPrinter",
    # Config / errors
    "PrimerConfig",
    "load_config",
    "TDDPrimerError",
    "InvalidArgumentError",
    "UnknownShapeKindError",
    "ConfigError",
]
