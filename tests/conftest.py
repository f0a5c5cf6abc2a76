import copy

import pytest

from instructions import InstructionFormatter
from phrases import PhraseDictionary, reload

DIRECTIONS = {
    "north": "north",
    "northeast": "northeast",
    "east": "east",
    "southeast": "southeast",
    "south": "south",
    "southwest": "southwest",
    "west": "west",
    "northwest": "northwest",
}

# small hand-written dictionary so cascade tests do not depend on the bundled wording
SAMPLE_PHRASES = {
    "meta": {"capitalizeFirstLetter": True},
    "v5": {
        "constants": {
            "direction": DIRECTIONS,
            "modifier": {"left": "left", "right": "right", "straight": "straight", "uturn": "U-turn"},
            "lanes": {"xo": "Keep right", "ox": "Keep left"},
        },
        "modes": {
            "ferry": {"default": "Take the ferry", "name": "Take the ferry {wayName}"},
        },
        "turn": {
            "default": {"default": "Make a {modifier}", "name": "Make a {modifier} onto {wayName}"},
            "left": {
                "default": "Turn left",
                "name": "Turn left onto {wayName}",
                "destination": "Turn left towards {destination}",
            },
        },
        "depart": {
            "default": {"default": "Head {direction}", "name": "Head {direction} on {wayName}"},
        },
        "arrive": {
            "default": {"default": "You have arrived at your {wayPoint} destination"},
        },
        "off ramp": {
            "default": {
                "default": "Take the ramp",
                "name": "Take the ramp onto {wayName}",
                "destination": "Take the ramp towards {destination}",
                "exit": "Take exit {exitCode}",
                "exit_destination": "Take exit {exitCode} towards {destination}",
            },
        },
        "rotary": {
            "default": {
                "default": {
                    "default": "Enter the traffic circle",
                    "name": "Enter the traffic circle and exit onto {wayName}",
                },
                "exit": {"default": "Enter the traffic circle and take the {exitIndex} exit"},
                "name": {"default": "Enter {rotaryName}"},
                "name_exit": {"default": "Enter {rotaryName} and take the {exitIndex} exit"},
            },
        },
        "roundabout": {
            "default": {
                "default": {"default": "Enter the roundabout"},
            },
        },
        "use lane": {
            "no_lanes": {"default": "Continue straight"},
            "default": {"default": "{laneInstruction}"},
        },
    },
}


@pytest.fixture
def sample_raw():
    return copy.deepcopy(SAMPLE_PHRASES)


@pytest.fixture
def sample_phrases(sample_raw):
    return PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")


@pytest.fixture(scope="session")
def english():
    return reload("en")


@pytest.fixture
def formatter(english):
    return InstructionFormatter(dictionary=english)
