import dataclasses
import logging
import math

from mingas.models.base import GasModel

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class AscentLeg:
    stops: int
    midpoint_depth: float
    average_depth: float
    minutes: float
    gas: float


@dataclasses.dataclass(frozen=True)
class GasBreakdown:
    depth: float
    dwell_gas: float
    ascent_legs: tuple[AscentLeg, AscentLeg]

    @property
    def ascent_gas(self):
        return sum(leg.gas for leg in self.ascent_legs)

    @property
    def total(self):
        return self.dwell_gas + self.ascent_gas


class MinGasModel(GasModel):
    """
    Gas reserve needed to solve a problem at depth and bring a buddy pair
    back to the surface.

    The ascent is split at half the depth, rounded to a 3 m stop. Both the
    floor and the ceiling stop count are evaluated and their ascent gas is
    added up, which brackets the rounding of the ascent time from above.
    """

    name = "Minimum gas"

    consumers = 2  # both divers breathe from the reserve
    time_at_depth = 1  # mins
    ascent_rate = 10  # m/mins
    stop_interval = 3  # m

    @staticmethod
    def pressure(depth):
        return 1 + depth / 10

    def consumption(self, breathing_rate, minutes, depth):
        return self.consumers * breathing_rate * minutes * self.pressure(depth)

    def ascent_stops(self, depth) -> tuple[int, int]:
        half_depth = depth / 2
        floor_stops = math.floor(half_depth / self.stop_interval)
        if math.floor(half_depth) % self.stop_interval > 0:
            return floor_stops, floor_stops + 1
        return floor_stops, floor_stops

    def ascent_leg(self, depth, breathing_rate, stops) -> AscentLeg:
        midpoint_depth = stops * self.stop_interval
        average_depth = (midpoint_depth + depth) / 2
        minutes = (depth - midpoint_depth) / self.ascent_rate
        return AscentLeg(
            stops=stops,
            midpoint_depth=midpoint_depth,
            average_depth=average_depth,
            minutes=minutes,
            gas=self.consumption(breathing_rate, minutes, average_depth),
        )

    def breakdown(self, depth, breathing_rate) -> GasBreakdown:
        dwell_gas = self.consumption(breathing_rate, self.time_at_depth, depth)
        legs = tuple(
            self.ascent_leg(depth, breathing_rate, stops)
            for stops in self.ascent_stops(depth)
        )
        breakdown = GasBreakdown(depth=depth, dwell_gas=dwell_gas, ascent_legs=legs)
        logger.debug(
            f"{depth} m @ {breathing_rate} l/min: dwell {dwell_gas:.1f} l, "
            f"ascent {' + '.join(f'{leg.gas:.1f}' for leg in legs)} l "
            f"(stops {'/'.join(str(leg.stops) for leg in legs)})"
        )
        return breakdown

    def required_gas(self, depth, breathing_rate):
        return self.breakdown(depth, breathing_rate).total


_default_model = MinGasModel()


def compute_required_gas(depth: float, breathing_rate: float) -> float:
    """Required gas in liters for ``depth`` meters at ``breathing_rate`` l/min."""
    return _default_model.required_gas(depth, breathing_rate)
