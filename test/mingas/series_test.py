import pytest

from mingas.errors import ConfigurationError
from mingas.models.base import GasModel
from mingas.models.mingas import compute_required_gas
from mingas.series import (
    DepthPoint,
    DepthRange,
    build_series,
    mingas_table,
    series_frame,
)

volumes = [10, 12, 15, 18, 20, 24]


class TestDepthRange:
    def test_depths(self):
        assert list(DepthRange(60, 0, 5).depths()) == list(range(60, 0, -5))
        assert list(DepthRange(10, 0, 2.5).depths()) == [10, 7.5, 5, 2.5]

    def test_reversed(self):
        assert DepthRange(0, 60, 5).normalized() == DepthRange(60, 0, 5)
        assert list(DepthRange(0, 60, 5).depths()) == list(range(60, 0, -5))

    @pytest.mark.parametrize("step", [0, -5])
    def test_invalid_step(self, step):
        with pytest.raises(ConfigurationError):
            DepthRange(60, 0, step).normalized()

    def test_negative_depth(self):
        with pytest.raises(ConfigurationError):
            DepthRange(-10, 30, 5).normalized()


class TestBuildSeries:
    def test_default_catalog(self):
        series = build_series(DepthRange(60, 0, 5), 30, volumes)

        assert list(series) == volumes
        for volume, points in series.items():
            assert len(points) == 12
            assert [point.depth for point in points] == list(range(60, 0, -5))
            gas = [point.required_gas for point in points]
            assert all(a > b for a, b in zip(gas, gas[1:]))

        assert series[10][0] == DepthPoint(60, compute_required_gas(60, 30) / 10)
        assert series[24][-1].required_gas == pytest.approx(
            compute_required_gas(5, 30) / 24
        )

    def test_reversed_range(self):
        assert build_series(DepthRange(0, 60, 5), 30, volumes) == build_series(
            DepthRange(60, 0, 5), 30, volumes
        )

    @pytest.mark.parametrize("step", [0, -1])
    def test_invalid_step(self, step):
        with pytest.raises(ConfigurationError):
            build_series(DepthRange(60, 0, step), 30, volumes)

    def test_invalid_volume(self):
        with pytest.raises(ConfigurationError):
            build_series(DepthRange(60, 0, 5), 30, [10, 0])

    def test_empty_range(self):
        series = build_series(DepthRange(30, 30, 5), 30, volumes)

        assert list(series) == volumes
        assert all(points == () for points in series.values())

    def test_zero_breathing_rate(self):
        series = build_series(DepthRange(20, 0, 10), 0, [12])

        assert series == {12: (DepthPoint(20, 0), DepthPoint(10, 0))}

    def test_custom_model(self):
        class DepthModel(GasModel):
            name = "Depth"

            def required_gas(self, depth, breathing_rate):
                return depth * breathing_rate

        series = build_series(DepthRange(20, 0, 10), 2, [10, 20], model=DepthModel())

        assert series[10] == (DepthPoint(20, 4), DepthPoint(10, 2))
        assert series[20] == (DepthPoint(20, 2), DepthPoint(10, 1))


class TestFrames:
    def test_series_frame(self):
        df = series_frame(build_series(DepthRange(60, 0, 5), 30, volumes))

        assert list(df.columns) == ["depth", "mingas", "volume", "cylinder"]
        assert len(df) == 72
        assert df.cylinder.iloc[0] == "10l"
        assert df.cylinder.iloc[-1] == "24l"
        assert df.depth.iloc[0] == 60

    def test_mingas_table(self):
        table = mingas_table(build_series(DepthRange(60, 0, 5), 30, volumes))

        assert table.shape == (12, 6)
        assert list(table.columns) == [f"{volume}l" for volume in volumes]
        assert list(table.index) == list(range(60, 0, -5))
        assert table.loc[40, "10l"] == pytest.approx(127.65)
