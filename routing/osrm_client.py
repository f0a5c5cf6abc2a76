#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route)
#error handling (non "Ok" codes -> OSRMError)
#parsing response JSON into your internal shape
#It should not contain instruction wording; see instructions/ for that.


from dotenv import load_dotenv
import os
from typing import List, Tuple, Dict, Any
import requests

# Read OSRM base URL from environment
# Example in .env:
# BASE_URL=http://router.project-osrm.org
load_dotenv()
BASE_URL = os.getenv("BASE_URL")

# Internal coordinate type: (lat, lon)
LatLon = Tuple[float, float]

class OSRMError(Exception):
    """Custom exception for OSRM client errors."""
    pass

class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Convert internal (lat, lon) → OSRM (lon,lat)
    - Return normalized outputs

    """
    def __init__(self, profile: str = "driving", timeout: int = 5, base_url: str = None):
        self.base_url = base_url or BASE_URL
        self.timeout = timeout #the time to wait for a response from OSRM before giving up
        self.profile = profile #the mode of transportation (driving, walking, cycling)

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set it in the .env file.")

    #----------------
    # Internal helpers
    #----------------
    def format_coordinates(self, coords: List[LatLon]) -> str:
        """Convert list of (lat, lon) to OSRM format 'lon,lat;lon,lat;...'"""
        return ';'.join([f"{lon},{lat}" for lat, lon in coords])

    def _get_route(self, coordinates: List[LatLon], params: Dict[str, str]) -> Dict[str, Any]:
        if len(coordinates) < 2:
            raise ValueError("At least two coordinates are required to compute a route.")

        url = f"{self.base_url}/route/v1/{self.profile}/{self.format_coordinates(coordinates)}"
        response = requests.get(url, params=params, timeout=self.timeout)

        data = response.json() #OSRM returns a JSON response with routes

        #validating OSRM response
        if data.get("code") != "Ok":
            raise OSRMError(f"OSRM error: {data.get('message', 'Unknown error')}")
        if not data.get("routes"):
            raise OSRMError("OSRM error: no route found")

        return data["routes"][0] #take the first route (OSRM may return alternatives)

    #----------------
    # Public methods
    #----------------
    def compute_route(self, coordinates: List[LatLon]) -> Dict[str, float]:
        """
        calls the OSRM /route endpoint with the given coordinates and
        returns a dict with distance and duration

        Returns:
            {
                "distance": float, # in meters
                "duration": float, # in seconds
            }
        """
        route = self._get_route(coordinates, {"overview": "false"})

        #Normalize output to internal format
        return {
            "distance": route["distance"],
            "duration": route["duration"],
        }

    def route_steps(self, coordinates: List[LatLon]) -> List[List[Dict[str, Any]]]:
        """
        calls /route with steps=true and returns the raw step objects,
        one list per leg (a route through N coordinates has N-1 legs).

        Feed each step to routing.step_adapter.step_from_osrm to get a RouteStep.
        """
        route = self._get_route(
            coordinates,
            {
                "overview": "false",
                "steps": "true", # maneuvers, names, lanes, exits
            },
        )
        return [leg.get("steps", []) for leg in route.get("legs", [])]
