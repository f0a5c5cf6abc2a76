import argparse
import os
from typing import List, Tuple

import pandas as pd

from instructions import InstructionFormatter, policy_from_env
from routing.osrm_client import OSRMClient
from routing.step_adapter import road_classes_from_osrm, step_from_osrm

LatLon = Tuple[float, float]


def parse_coordinates(values: List[str]) -> List[LatLon]:
    """'52.517037,13.388860' -> (52.517037, 13.388860)"""
    coordinates = []
    for value in values:
        lat, lon = value.split(",")
        coordinates.append((float(lat), float(lon)))
    return coordinates


def generate_instructions(coordinates: List[LatLon], locale: str = None, output_file="route_instructions.csv"):
    """
    Fetches a route through `coordinates` from OSRM and writes one row per
    step with its spoken instruction.
    """
    formatter = InstructionFormatter(policy_from_env())
    if locale:
        formatter.locale = locale

    osrm_client = OSRMClient()
    legs = osrm_client.route_steps(coordinates)

    rows = []
    for leg_index, steps in enumerate(legs):
        for step_index, raw_step in enumerate(steps):
            step = step_from_osrm(raw_step)
            instruction = formatter.format(
                step,
                leg_index=leg_index,
                leg_count=len(legs),
                road_classes=road_classes_from_osrm(raw_step),
            )
            rows.append({
                "leg": leg_index + 1,
                "step": step_index + 1,
                "maneuver_type": raw_step.get("maneuver", {}).get("type"),
                "modifier": raw_step.get("maneuver", {}).get("modifier"),
                "name": raw_step.get("name"),
                "distance_m": raw_step.get("distance"),
                "duration_s": raw_step.get("duration"),
                "instruction": instruction,
            })

    df = pd.DataFrame(rows)
    df.to_csv(output_file, index=False)
    print(f"Generated {len(df)} instructions for {len(legs)} legs and saved to '{output_file}'")

    skipped = df["instruction"].isna().sum() if not df.empty else 0
    if skipped:
        print(f"  {skipped} steps had no instruction")

    print("\nFirst steps:")
    for _, row in df.head(5).iterrows():
        print(f"  {row['leg']}.{row['step']}: {row['instruction']}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Write turn-by-turn instructions for an OSRM route to CSV.")
    parser.add_argument("coordinates", nargs="+", help="lat,lon pairs, at least two")
    parser.add_argument("--locale", default=os.getenv("INSTRUCTIONS_LOCALE"))
    parser.add_argument("--output", default="route_instructions.csv")
    args = parser.parse_args()

    generate_instructions(parse_coordinates(args.coordinates), locale=args.locale, output_file=args.output)
