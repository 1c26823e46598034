import dataclasses
import logging
from typing import Iterator, Sequence

import pandas as pd

from mingas.cylinder import Cylinder
from mingas.errors import ConfigurationError
from mingas.models.base import GasModel
from mingas.models.mingas import MinGasModel

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class DepthPoint:
    depth: float
    required_gas: float


Series = tuple[DepthPoint, ...]


@dataclasses.dataclass(frozen=True)
class DepthRange:
    start: float
    end: float
    step: float

    def normalized(self) -> "DepthRange":
        if self.step <= 0:
            raise ConfigurationError(f"depth step must be positive, got {self.step}")
        start, end = self.start, self.end
        if start < end:
            start, end = end, start
        if end < 0:
            raise ConfigurationError(f"depths must not be negative, got {end}")
        return DepthRange(start, end, self.step)

    def depths(self) -> Iterator[float]:
        depth_range = self.normalized()
        i = 0
        depth = depth_range.start
        while depth > depth_range.end:
            yield depth
            i += 1
            depth = depth_range.start - i * depth_range.step

    def __repr__(self):
        return f"{self.start} m -> {self.end} m every {self.step} m"


def build_series(
    depth_range: DepthRange,
    breathing_rate: float,
    cylinder_volumes: Sequence[int],
    model: GasModel | None = None,
) -> dict[int, Series]:
    if model is None:
        model = MinGasModel()

    depth_range = depth_range.normalized()
    cylinders = [Cylinder(volume) for volume in cylinder_volumes]
    depths = list(depth_range.depths())
    logger.debug(
        f"{model!r} over {depth_range!r} ({len(depths)} depths) at {breathing_rate} l/min"
    )

    data = {}
    for cylinder in cylinders:
        data[cylinder.volume] = tuple(
            DepthPoint(
                depth=depth,
                required_gas=cylinder.pressure_for(
                    model.required_gas(depth, breathing_rate)
                ),
            )
            for depth in depths
        )
        logger.debug(f"built {len(data[cylinder.volume])} points for {cylinder!r}")
    return data


def series_frame(series: dict[int, Series]) -> pd.DataFrame:
    rows = [
        {
            "depth": point.depth,
            "mingas": point.required_gas,
            "volume": volume,
            "cylinder": Cylinder(volume).label,
        }
        for volume, points in series.items()
        for point in points
    ]
    return pd.DataFrame(rows, columns=["depth", "mingas", "volume", "cylinder"])


def mingas_table(series: dict[int, Series]) -> pd.DataFrame:
    df = series_frame(series)
    labels = [Cylinder(volume).label for volume in series]
    table = df.pivot(index="depth", columns="cylinder", values="mingas")
    table = table.reindex(columns=labels).sort_index(ascending=False)
    table.columns.name = None
    table.index.name = "depth [m]"
    return table
