import pytest

from ourpaint.leftmenu import (
    FigureEntry,
    LeftMenu,
    RequirementEntry,
    parse_figure_lines,
)


@pytest.fixture
def menu():
    return LeftMenu()


def test_point_lines_format(menu):
    entry = menu.add_figure(7, "Point", [1.5, -2.0])
    assert entry.lines == ["ID: 7", "X: 1.500000", "Y: -2.000000"]


def test_circle_and_section_field_names(menu):
    circle = menu.add_figure(1, "Circle", [0, 0, 3])
    section = menu.add_figure(2, "Section", [0, 0, 1, 1])
    assert [line.split(": ")[0] for line in circle.lines] == ["ID", "X", "Y", "R"]
    assert [line.split(": ")[0] for line in section.lines] == [
        "ID", "X1", "Y1", "X2", "Y2",
    ]


def test_unsupported_param_count_has_no_lines(menu):
    entry = menu.add_figure(3, "Odd", [1.0])
    assert entry.lines == []


def test_duplicate_names_get_counter(menu):
    names = [menu.add_figure(i, "Point", [0, 0]).name for i in range(1, 4)]
    assert names == ["Point", "Point1", "Point2"]


def test_counter_skips_taken_names(menu):
    menu.add_figure(1, "Point", [0, 0])
    menu.add_figure(2, "Point1", [0, 0])
    assert menu.add_figure(3, "Point", [0, 0]).name == "Point2"


def test_clear_text_empties_figures(menu):
    menu.add_figure(1, "Point", [0, 0])
    assert menu.add_figure(0, "Clear", []) is None
    assert menu.figures == ()


def test_clear_figures_allows_name_reuse(menu):
    menu.add_figure(1, "Point", [0, 0])
    menu.clear_figures()
    assert menu.add_figure(2, "Point", [0, 0]).name == "Point"


def test_figure_names_maps_ids(menu):
    menu.add_figure(4, "Point", [1, 2])
    menu.add_figure(9, "Circle", [1, 2, 3])
    assert menu.figure_names() == {4: "Point", 9: "Circle"}


def test_figure_names_first_listing_wins(menu):
    menu.add_figure(4, "A", [1, 2])
    menu.add_figure(4, "B", [1, 2])
    assert menu.figure_names() == {4: "A"}


def test_round_trip_through_lines(menu):
    entry = menu.add_figure(12, "Section", [1.25, -3.5, 0.0, 8.0])
    figure_id, params = parse_figure_lines(entry.lines)
    assert figure_id == 12
    assert params == [1.25, -3.5, 0.0, 8.0]


def test_parse_skips_malformed_lines():
    figure_id, params = parse_figure_lines(
        ["ID: 3", "X: abc", "garbage", "Y: 2.5", "A: 1: 2"]
    )
    assert figure_id == 3
    assert params == [2.5]


def test_parse_bad_id_gives_zero():
    figure_id, params = parse_figure_lines(["ID: x", "X: 1"])
    assert figure_id == 0
    assert params == [1.0]


def test_requirement_lines(menu):
    entry = menu.add_requirement(5, "PointOnPoint", 1, 2, 0)
    assert entry.lines == [
        "ID: 5",
        "Requirement ID: 1",
        "Element ID: 2",
        "Parameter: 0",
    ]


def test_requirement_parameter_shortest(menu):
    entry = menu.add_requirement(6, "PointPointDist", 1, 2, 2.5)
    assert entry.lines[-1] == "Parameter: 2.5"


def test_requirements_keep_order_and_clear(menu):
    menu.add_requirement(1, "ParallelSections", 3, 4, 0)
    menu.add_requirement(2, "PerpendicularSections", 3, 4, 0)
    assert menu.requirement_names() == {1: "ParallelSections", 2: "PerpendicularSections"}
    assert menu.add_requirement(0, "Clear", 0, 0, 0) is None
    assert menu.requirements == ()


def test_requirement_names_allow_duplicates(menu):
    menu.add_requirement(1, "Same", 3, 4, 0)
    menu.add_requirement(2, "Same", 5, 6, 0)
    assert [r.name for r in menu.requirements] == ["Same", "Same"]


def test_entries_compare_by_value():
    assert FigureEntry("P", 1, (1.0, 2.0)) == FigureEntry("P", 1, (1.0, 2.0))
    assert RequirementEntry("R", 1, 2, 3, 0.0).id2 == 3