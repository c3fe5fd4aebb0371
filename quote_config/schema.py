"""
PricingConfiguration schema.

Defines the runtime artifact produced from a human-authored YAML
configuration set.  YAML fragments are parsed into these types by the
loader and handed out by ``quote_config.get_active_config()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from quote_kernel.domain.values import RoundingPolicy


@dataclass(frozen=True)
class PricingConfiguration:
    """A validated pricing configuration set.

    Attributes:
        config_id: Stable identifier of the set.
        version: Monotonic version of the set.
        rounding: Decimal places at each rounding boundary.
        description: Free-text note for reviewers.
        checksum: SHA-256 of the canonical source, for change detection.
    """

    config_id: str
    version: int
    rounding: RoundingPolicy
    description: str = ""
    checksum: str = ""
