#Marks routing as a package.
#Re-exports the OSRM client and the step adapter so other modules import from
#routing without knowing internal file names.
#No instruction wording here.

from .osrm_client import OSRMClient, OSRMError
from .step_adapter import parse_destinations, road_classes_from_osrm, step_from_osrm

__all__ = [
    "OSRMClient",
    "OSRMError",
    "step_from_osrm",
    "road_classes_from_osrm",
    "parse_destinations",
]
