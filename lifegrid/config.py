"""Simulation configuration for World instances."""

from typing import Optional

from .core.errors import InvalidArgumentError
from .core.rules import LifeRule


class SimulationConfig:
    """Defaults applied by a World when the caller does not override them."""

    def __init__(self,
                 toroidal: bool = False,
                 rule: Optional[LifeRule] = None,
                 log_interval: Optional[int] = None):
        """Initialize simulation configuration.

        Args:
            toroidal: Default topology for step/advance when none is given
            rule: Transition rule (standard B3/S23 if None)
            log_interval: Log advance progress every this many generations

        Raises:
            InvalidArgumentError: If log_interval is not a positive integer
        """
        if log_interval is not None and (isinstance(log_interval, bool)
                                         or not isinstance(log_interval, int)
                                         or log_interval <= 0):
            raise InvalidArgumentError(f"log_interval must be a positive integer, got {log_interval!r}")

        self.toroidal = bool(toroidal)
        self.rule = rule.copy() if rule is not None else LifeRule.standard()
        self.log_interval = log_interval

    def copy(self) -> 'SimulationConfig':
        """Create a deep copy of the configuration."""
        return SimulationConfig(
            toroidal=self.toroidal,
            rule=self.rule,
            log_interval=self.log_interval
        )

    def __repr__(self) -> str:
        return (f"SimulationConfig(toroidal={self.toroidal}, rule={self.rule.rulestring}, "
                f"log_interval={self.log_interval})")
