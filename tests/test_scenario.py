import pytest

from bookshelf.scenario import Scenario, ScenarioError, load_scenario, parse_scenario
from config import Settings

SCENARIO = {
    "capacity": {"max_book_capacity": 2, "max_borrowed_books": 1, "max_patron_capacity": 1},
    "books": [
        {"title": "A", "author": "Writer", "comic_value": 5},
        {"title": "B", "author": "Writer", "dramatic_value": 3},
    ],
    "patrons": [
        {"first_name": "P", "last_name": "Q", "comic_tendency": 2, "enjoyment_threshold": 10},
    ],
    "operations": [
        {"op": "borrow", "book_id": 0, "patron_id": 0},
        {"op": "available", "book_id": 0},
        {"op": "borrow", "book_id": 0, "patron_id": 0},
        {"op": "return", "book_id": 0},
        {"op": "suggest", "patron_id": 0},
        {"op": "score", "book_id": 1, "patron_id": 0},
        {"op": "return", "book_id": 7},
    ],
}


def test_load_and_build(scenario_file):
    scenario = load_scenario(scenario_file(SCENARIO))
    lib = scenario.build_library()
    assert lib.max_book_capacity == 2
    assert [b.title for _, b in lib.list_books()] == ["A", "B"]
    assert lib.get_patron(0).string_representation() == "P Q"

def test_run_replays_operations_in_order(scenario_file):
    scenario = load_scenario(scenario_file(SCENARIO))
    lib = scenario.build_library()
    results = scenario.run(lib)

    assert [r.op for r in results] == ["borrow", "available", "borrow", "return", "suggest", "score", "return"]
    assert [r.success for r in results] == [True, True, False, True, True, True, False]
    assert results[1].value is False
    assert results[4].value == 0
    assert results[5].value == 0
    assert "No book with id 7" in results[6].message
    assert lib.is_book_available(0)

def test_entries_beyond_capacity_are_dropped():
    data = dict(SCENARIO, books=SCENARIO["books"] + [{"title": "C"}], operations=[])
    lib = parse_scenario(data).build_library()
    assert len(lib.list_books()) == 2

def test_missing_capacity_uses_settings():
    settings = Settings(max_book_capacity=7, max_borrowed_books=2, max_patron_capacity=4)
    scenario = parse_scenario({"capacity": {"max_patron_capacity": 1}}, settings)
    assert scenario.capacity == {"max_book_capacity": 7, "max_borrowed_books": 2, "max_patron_capacity": 1}

def test_empty_scenario_runs_nothing():
    scenario = Scenario(capacity={"max_book_capacity": 1, "max_borrowed_books": 1, "max_patron_capacity": 1})
    assert scenario.run(scenario.build_library()) == []

@pytest.mark.parametrize("data, match", [
    ([], "JSON object"),
    ({"capacity": {"max_book_capacity": 0}}, "max_book_capacity"),
    ({"capacity": [1]}, "'capacity'"),
    ({"books": {"title": "x"}}, "'books'"),
    ({"books": [{"title": "x", "comic_value": -4}]}, "comic_value"),
    ({"patrons": [{"first_name": "1", "last_name": "2"}]}, "patron name"),
    ({"operations": [{"op": "burn", "book_id": 0}]}, "Unknown operation"),
])
def test_invalid_scenarios(data, match):
    with pytest.raises(ScenarioError, match=match):
        parse_scenario(data)

def test_bad_operation_argument_raises_on_run():
    scenario = parse_scenario({"operations": [{"op": "borrow", "book_id": "zero", "patron_id": 0}]})
    with pytest.raises(ScenarioError, match="book_id"):
        scenario.run(scenario.build_library())

def test_missing_file(tmp_path):
    with pytest.raises(ScenarioError, match="not found"):
        load_scenario(tmp_path / "nope.json")

def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ScenarioError, match="Invalid JSON"):
        load_scenario(path)

def test_scenario_error_is_value_error():
    assert issubclass(ScenarioError, ValueError)
