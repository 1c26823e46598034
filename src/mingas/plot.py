import logging
from pathlib import Path
from typing import Sequence

import plotly.express as px
import plotly.graph_objects as go

from mingas.cylinder import Cylinder
from mingas.errors import RenderError
from mingas.series import DepthRange, Series, series_frame

logger = logging.getLogger(__name__)

gas_tick = 10  # bar


def plot_mingas(
    series: dict[int, Series],
    breathing_rate: float,
    cylinder_volumes: Sequence[int],
    depth_range: DepthRange | None = None,
) -> go.Figure:
    df = series_frame(series)
    labels = [Cylinder(volume).label for volume in cylinder_volumes]

    try:
        fig = px.line(
            df,
            x="depth",
            y="mingas",
            color="cylinder",
            markers=True,
            category_orders={"cylinder": labels},
            labels={"depth": "depth [m]", "mingas": "mingas [bar]", "cylinder": ""},
            title=f"mingas for AMV = {breathing_rate:g} l/min",
        )
    except ValueError as e:
        raise RenderError(f"could not build mingas chart: {e}") from e

    if depth_range is not None:
        depth_range = depth_range.normalized()
        ticks = [
            depth_range.end + i * depth_range.step
            for i in range(len(list(depth_range.depths())))
        ]
        fig.update_xaxes(tickmode="array", tickvals=ticks)
    fig.update_xaxes(showgrid=True)
    fig.update_yaxes(showgrid=True, rangemode="tozero", dtick=gas_tick)
    return fig


def save_figure(fig: go.Figure, path: Path, width: int, height: int):
    path = Path(path)
    logger.info(f"writing {width}x{height} px chart to {path}")
    try:
        if path.suffix.lower() == ".html":
            fig.write_html(path)
        else:
            fig.write_image(path, width=width, height=height)
    except Exception as e:
        raise RenderError(f"could not write chart to {path}: {e}") from e
    return path
