import pytest

from instructions.lanes import lane_config, lane_config_for_intersection
from instructions.models import Intersection


@pytest.mark.parametrize(
    "lane_count, usable, expected",
    [
        (3, {1}, "xox"),
        (3, [0, 1, 2], "o"),
        (4, [], "x"),
        (4, [2, 3], "xo"),
        (4, [0, 1], "ox"),
        (5, [0, 1, 3], "oxox"),
        (3, [0, 2], "oxo"),
    ],
)
def test_signature(lane_count, usable, expected):
    assert lane_config(lane_count, usable) == expected


def test_no_lane_data():
    assert lane_config(0, []) == ""
    assert lane_config(3, None) == ""


def test_uniform_lanes_give_one_character():
    assert len(lane_config(6, range(6))) == 1
    assert len(lane_config(6, [])) == 1


def test_out_of_range_index_is_ignored():
    assert lane_config(3, [1, 7]) == "xox"


def test_from_intersection():
    intersection = Intersection(
        approach_lanes=["left", "straight", "right"],
        usable_approach_lanes=[1],
    )
    assert intersection.lane_count == 3
    assert lane_config_for_intersection(intersection) == "xox"


def test_intersection_without_lanes():
    assert lane_config_for_intersection(None) == ""
    assert lane_config_for_intersection(Intersection()) == ""
    assert lane_config_for_intersection(Intersection(approach_lanes=["left"])) == ""
