from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import plotly.graph_objects as go

from orbit_viewer.core.constants import GEO_ALTITUDE_KM, KARMAN_LINE_KM, LEO_MAX_KM, R_EARTH_KM
from orbit_viewer.core.frames import Vector3, to_units
from orbit_viewer.simulation.engine import SimulationLog
from orbit_viewer.simulation.scenario import Scenario

# (label, altitude km, color, opacity) reference rings in the orbital plane
ZONE_RINGS: List[Tuple[str, float, str, float]] = [
    ("Karman line", KARMAN_LINE_KM, "#ff0000", 0.8),
    ("LEO boundary", LEO_MAX_KM, "#00ff00", 0.3),
    ("GEO", GEO_ALTITUDE_KM, "#00ffff", 0.5),
]


def _sphere_mesh(center: Vector3, radius: float, n_lat: int = 30, n_lon: int = 60):
    # Parametric sphere, Y up to match the orbital plane (X-Z)
    cx, cy, cz = center
    lats = [(-math.pi / 2) + i * (math.pi / (n_lat - 1)) for i in range(n_lat)]
    lons = [(-math.pi) + j * (2 * math.pi / (n_lon - 1)) for j in range(n_lon)]

    x = []
    y = []
    z = []
    for lat in lats:
        x.append([cx + radius * math.cos(lat) * math.cos(lon) for lon in lons])
        y.append([cy + radius * math.sin(lat) for _lon in lons])
        z.append([cz + radius * math.cos(lat) * math.sin(lon) for lon in lons])
    return x, y, z


def _ring(radius: float, n: int = 128):
    angles = [2 * math.pi * k / n for k in range(n + 1)]
    xs = [radius * math.cos(a) for a in angles]
    zs = [radius * math.sin(a) for a in angles]
    return xs, [0.0] * len(xs), zs


def _scene_extent(scenario: Scenario) -> float:
    moon_reach = scenario.moon.position[0] + scenario.moon.radius_units
    return 1.05 * max(moon_reach, scenario.simulator.radius_units())


def scene_camera(scenario: Scenario, extent: float) -> Dict[str, Dict[str, float]]:
    """
    Plotly scene camera from the viewer camera. Plotly wants eye/center in
    normalized scene coordinates; with a cube range of [-extent, extent] that
    is the render-unit position divided by extent.
    """
    ex, ey, ez = scenario.camera.position
    cx, cy, cz = scenario.camera.look_at
    # Viewer is Y-up; plotly is Z-up
    return dict(
        eye=dict(x=ex / extent, y=ez / extent, z=ey / extent),
        center=dict(x=cx / extent, y=cz / extent, z=cy / extent),
        up=dict(x=0.0, y=0.0, z=1.0),
    )


def _swap_yz(xs, ys, zs):
    return xs, zs, ys


def build_scene_figure(scenario: Scenario, log: Optional[SimulationLog] = None) -> go.Figure:
    """
    3D scene in render units:
      - Earth and Moon spheres
      - Zone reference rings
      - Satellite track (from the log, if any) and current position
    """
    fig = go.Figure()

    ex, ey, ez = _sphere_mesh(scenario.earth.position, scenario.earth.radius_units)
    fig.add_trace(go.Surface(
        x=ex, y=ez, z=ey,
        showscale=False, opacity=0.6, colorscale=[[0, "#2233ff"], [1, "#2233ff"]],
        name="Earth",
    ))

    mx, my, mz = _sphere_mesh(scenario.moon.position, scenario.moon.radius_units, n_lat=16, n_lon=32)
    fig.add_trace(go.Surface(
        x=mx, y=mz, z=my,
        showscale=False, colorscale=[[0, "#aaaaaa"], [1, "#aaaaaa"]],
        name="Moon",
    ))

    for label, alt_km, color, opacity in ZONE_RINGS:
        rx, ry, rz = _swap_yz(*_ring(to_units(R_EARTH_KM + alt_km)))
        fig.add_trace(go.Scatter3d(
            x=rx, y=ry, z=rz,
            mode="lines", name=label, opacity=opacity,
            line=dict(color=color, width=2),
        ))

    if log is not None and log.frames:
        track = log.satellite_track()
        fig.add_trace(go.Scatter3d(
            x=[r[0] for r in track], y=[r[2] for r in track], z=[r[1] for r in track],
            mode="lines", name="Satellite track",
        ))

    sx, sy, sz = scenario.simulator.current_position()
    fig.add_trace(go.Scatter3d(
        x=[sx], y=[sz], z=[sy],
        mode="markers", name="Satellite",
        marker=dict(size=5, color="#ffff00"),
    ))

    extent = _scene_extent(scenario)
    telemetry = scenario.telemetry()
    fig.update_layout(
        title=f"{scenario.name} - {telemetry.zone} | v={telemetry.velocity} km/s | T={telemetry.period} min",
        scene=dict(
            xaxis=dict(title="X (R_E)", range=[-extent, extent]),
            yaxis=dict(title="Z (R_E)", range=[-extent, extent]),
            zaxis=dict(title="Y (R_E)", range=[-extent, extent]),
            aspectmode="cube",
            camera=scene_camera(scenario, extent),
        ),
        paper_bgcolor="#00050a",
        font=dict(color="#dddddd"),
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(orientation="h"),
    )
    return fig


def render_scene(
    scenario: Scenario,
    log: Optional[SimulationLog] = None,
    out_html: str = "out/orbit_scene.html",
) -> str:
    fig = build_scene_figure(scenario, log)
    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html


def render_playback(
    scenario: Scenario,
    log: SimulationLog,
    out_html: str = "out/orbit_playback.html",
    max_frames: int = 200,
) -> str:
    """
    Animated playback of a recorded run: the satellite marker moves across
    frames and the title carries that frame's telemetry.
    """
    if not log.frames:
        raise ValueError("Log has no recorded frames.")

    fig = build_scene_figure(scenario, log)
    marker_idx = len(fig.data) - 1

    stride = max(1, len(log.frames) // max_frames)
    samples = log.frames[::stride]

    frames = []
    for i, s in enumerate(samples):
        x, y, z = s.satellite
        frames.append(go.Frame(
            name=str(i),
            data=[go.Scatter3d(x=[x], y=[z], z=[y], mode="markers", marker=dict(size=5, color="#ffff00"))],
            traces=[marker_idx],
            layout=go.Layout(title=f"t={s.t_s:.1f}s - {s.telemetry.zone} | v={s.telemetry.velocity} km/s"),
        ))
    fig.frames = frames

    fig.update_layout(
        updatemenus=[dict(
            type="buttons",
            showactive=True,
            buttons=[
                dict(label="Play", method="animate",
                     args=[None, {"frame": {"duration": 50, "redraw": True}, "fromcurrent": True}]),
                dict(label="Pause", method="animate",
                     args=[[None], {"frame": {"duration": 0, "redraw": False}, "mode": "immediate"}]),
            ],
        )],
        sliders=[dict(
            steps=[dict(method="animate", args=[[str(i)], {"mode": "immediate", "frame": {"duration": 0, "redraw": True}}],
                        label=f"{samples[i].t_s:.0f}s") for i in range(0, len(samples), max(1, len(samples)//20))],
            active=0
        )]
    )

    Path(out_html).parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(out_html, auto_open=False)
    return out_html
