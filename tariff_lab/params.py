"""Input vector for the tariff model and its domain checks."""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from tariff_lab.config import DEFAULTS

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when a parameter set cannot be fed to the model."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


@dataclass(frozen=True)
class ModelParameters:
    tariff_rate_pct: float
    fixed_cost: float
    initial_variable_cost: float
    learning_rate: float
    output_tons: float
    world_price: float
    num_years: int
    demand_intercept: float
    demand_slope: float

    @classmethod
    def defaults(cls) -> "ModelParameters":
        return cls.from_mapping(DEFAULTS)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ModelParameters":
        """Build from widget values; missing keys fall back to the defaults."""
        merged = {**DEFAULTS, **{k: v for k, v in values.items() if v is not None}}
        names = [f.name for f in fields(cls)]
        unknown = sorted(set(merged) - set(names))
        if unknown:
            raise InvalidParameterError([f"Unknown parameter: {k}" for k in unknown])
        problems = []
        kwargs = {}
        for name in names:
            try:
                kwargs[name] = float(merged[name])
            except (TypeError, ValueError):
                problems.append(f"{name} must be a number (got {merged[name]!r})")
        if problems:
            raise InvalidParameterError(problems)
        years = kwargs["num_years"]
        kwargs["num_years"] = int(years) if math.isfinite(years) and years.is_integer() else years
        return cls(**kwargs)

    def problems(self) -> list[str]:
        """Return a list of domain violations (empty when the set is usable)."""
        out = []
        usable = {}
        for name, value in asdict(self).items():
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                out.append(f"{name} must be a number (got {value!r})")
            elif not math.isfinite(value):
                out.append(f"{name} must be a finite number")
            elif value < 0:
                out.append(f"{name} must be non-negative")
            else:
                usable[name] = value

        # Degenerate arithmetic is rejected up front rather than drawn as NaN/inf.
        if usable.get("output_tons") == 0:
            out.append("non-positive output: output_tons must be greater than 0")
        if usable.get("demand_slope") == 0:
            out.append("demand_slope must be greater than 0")

        years = usable.get("num_years")
        if years is not None and not (float(years).is_integer() and years >= 1):
            out.append("num_years must be a whole number of at least 1")
        return out

    def validate(self) -> "ModelParameters":
        problems = self.problems()
        if problems:
            logger.warning("Rejected parameters %s: %s", asdict(self), problems)
            raise InvalidParameterError(problems)
        return self

    def replace(self, **changes) -> "ModelParameters":
        return ModelParameters(**{**asdict(self), **changes})
