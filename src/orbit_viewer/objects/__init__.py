from orbit_viewer.objects.bodies import Earth, Moon
from orbit_viewer.objects.satellite import OrbitalSimulator

__all__ = ["Earth", "Moon", "OrbitalSimulator"]
