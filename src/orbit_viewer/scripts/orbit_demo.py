import logging

from orbit_viewer.core.config import SimulationConfig
from orbit_viewer.simulation.commands import RequestFocus, SetAltitude, SetTimeScale
from orbit_viewer.simulation.engine import Engine
from orbit_viewer.simulation.scenario import Scenario
from orbit_viewer.simulation.systems import default_systems
from orbit_viewer.visualization.export_log import export_playback_bundle
from orbit_viewer.visualization.plotly_viewer import render_playback, render_scene

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-7s  %(name)s  %(message)s",
    datefmt="%H:%M:%S"
)

scenario = Scenario.from_config(SimulationConfig(), name="Orbit Demo")
engine = Engine(systems=default_systems())

# 60 Hz for 20 s of wall time, with the UI actions a user would take
log = engine.run(
    scenario,
    dt_s=1.0 / 60.0,
    n_frames=1200,
    commands={
        0: [SetTimeScale(500.0)],
        120: [SetAltitude(400.0), RequestFocus("satellite")],
        150: [RequestFocus("moon")],
        600: [SetAltitude(-5.0)],
        700: [RequestFocus("earth"), SetTimeScale(2000.0)],
    },
)

t = scenario.telemetry()
print(f"Zone={t.zone}  v={t.velocity} km/s  T={t.period} min  scale={t.time_scale}")

scene_path = render_scene(scenario, log, out_html="out/orbit_scene.html")
playback_path = render_playback(scenario, log, out_html="out/orbit_playback.html")
bundle_path = export_playback_bundle(scenario, log, out_path="out/playback_bundle.json")

print("Wrote:")
print(" -", scene_path)
print(" -", playback_path)
print(" -", bundle_path)
print("\nOpen the HTML files in your browser.")
