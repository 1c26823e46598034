import dataclasses
from pathlib import Path

from mingas.series import DepthRange

MM_PER_INCH = 25.4


@dataclasses.dataclass(frozen=True)
class MinGasConfig:
    breathing_rate: float = 30  # l/min
    cylinder_volumes: tuple[int, ...] = (10, 12, 15, 18, 20, 24)  # l
    depth_range: DepthRange = DepthRange(60, 0, 5)
    output: Path = Path("mingas.png")

    width_mm: float = 180
    height_mm: float = 130
    dpi: int = 96

    def _to_px(self, mm):
        return round(mm / MM_PER_INCH * self.dpi)

    @property
    def width_px(self):
        return self._to_px(self.width_mm)

    @property
    def height_px(self):
        return self._to_px(self.height_mm)


default_config = MinGasConfig()
