"""
quote_config -- single public entrypoint for pricing configuration.

Responsibility:
    Provides the ONLY way to obtain pricing configuration at runtime
    through ``get_active_config()``.  Returns a frozen
    ``PricingConfiguration``; YAML loading is internal.

Architecture position:
    Configuration -- sits above ``quote_kernel`` and below
    ``quote_services``.  Engines MUST NEVER import from ``quote_config``;
    the service layer passes the resolved ``RoundingPolicy`` into them.

Failure modes:
    - ``PricingConfigNotFoundError`` -- no set with the requested name.
    - ``InvalidPricingConfigError`` -- structural validation failure.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``QUOTE_CONFIG_TRACE`` log entry with the config_id, version and
    checksum, tying each priced item to the rounding rules that
    governed it.
"""

from __future__ import annotations

from pathlib import Path

from quote_config.loader import load_configuration
from quote_config.schema import PricingConfiguration
from quote_kernel.exceptions import PricingConfigNotFoundError
from quote_kernel.logging_config import get_logger

_logger = get_logger("config")

# Default configuration sets directory
_DEFAULT_CONFIG_DIR = Path(__file__).parent / "sets"


def get_active_config(
    name: str = "default",
    config_dir: Path | None = None,
) -> PricingConfiguration:
    """The ONLY public configuration entrypoint.

    Args:
        name: Configuration set name (``<name>.yaml`` in the sets directory).
        config_dir: Override path to the configuration sets directory.
            Defaults to quote_config/sets/.

    Raises:
        PricingConfigNotFoundError: If the set does not exist.
        InvalidPricingConfigError: If the set fails validation.
    """
    sets_dir = config_dir or _DEFAULT_CONFIG_DIR
    path = sets_dir / f"{name}.yaml"
    if not path.is_file():
        raise PricingConfigNotFoundError(name, str(sets_dir))

    config = load_configuration(path)

    _logger.info(
        "QUOTE_CONFIG_TRACE",
        extra={
            "trace_type": "QUOTE_CONFIG_TRACE",
            "config_id": config.config_id,
            "config_version": config.version,
            "config_checksum": config.checksum,
            "money_scale": config.rounding.money_scale,
            "quantity_scale": config.rounding.quantity_scale,
            "fixed_quantity_scale": config.rounding.fixed_quantity_scale,
        },
    )
    return config


__all__ = [
    "PricingConfiguration",
    "get_active_config",
]
