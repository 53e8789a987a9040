from __future__ import annotations

import json

import pytest

from src.wfh_tracker.wfh_tracker.core.exceptions import RosterUnavailableError
from src.wfh_tracker.wfh_tracker.roster.json_roster_repository import JsonRosterRepository
from src.wfh_tracker.wfh_tracker.roster.service import RosterService


@pytest.fixture
def svc(roster_repo):
    return RosterService(roster_repo)


def test_root_is_the_name_outside_the_roster(svc):
    assert svc.find_root() == "CEO"
    assert svc.find_roots() == ["CEO"]


def test_cyclic_roster_has_no_root(person_factory, roster_factory):
    svc = RosterService(
        roster_factory([person_factory("Ann", "Ben"), person_factory("Ben", "Ann")])
    )
    assert svc.find_root() is None
    assert svc.build_tree() == []


def test_direct_reports(svc):
    assert [p.full_name for p in svc.direct_reports("Alice")] == ["Bob", "Carol"]
    assert [p.full_name for p in svc.direct_reports("CEO")] == ["Alice"]
    assert svc.direct_reports("Dave") == []
    assert svc.direct_reports("Nobody") == []


def test_is_manager(svc):
    assert svc.is_manager("Bob")
    assert not svc.is_manager("Dave")
    assert not svc.is_manager("CEO")


def test_build_tree_nests_reports(svc):
    tree = svc.build_tree()
    assert [n["person"].full_name for n in tree] == ["Alice"]
    alice = tree[0]
    assert [n["person"].full_name for n in alice["reports"]] == ["Bob", "Carol"]
    assert [n["person"].full_name for n in alice["reports"][0]["reports"]] == ["Dave"]


def test_lookups_and_listing(svc):
    assert svc.get_by_email("CAROL@x.com").full_name == "Carol"
    assert svc.get_by_name("Zed") is None
    assert [p.full_name for p in svc.list_people()] == ["Alice", "Bob", "Carol", "Dave"]
    assert svc.list_areas() == ["Engineering", "Operations"]


def test_duplicate_names_are_rejected(person_factory, roster_factory):
    svc = RosterService(
        roster_factory([person_factory("Ann", "CEO"), person_factory("Ann", "CEO", pid="ann2")])
    )
    with pytest.raises(RosterUnavailableError):
        svc.list_people()


def _write_roster(tmp_path, users):
    path = tmp_path / "users.json"
    path.write_text(json.dumps({"users": users}), encoding="utf-8")
    return path


def test_json_roster_loads_people(tmp_path):
    path = _write_roster(
        tmp_path,
        [
            {
                "igg": "100",
                "fullName": "Ann Lee",
                "jobTitle": "Director",
                "area": "Finance",
                "email": "ann@x.com",
                "reportsTo": "Board",
                "password": "ignored",
            }
        ],
    )
    people = JsonRosterRepository(path).list_all()

    assert len(people) == 1
    assert people[0].to_dict() == {
        "igg": "100",
        "fullName": "Ann Lee",
        "jobTitle": "Director",
        "area": "Finance",
        "email": "ann@x.com",
        "reportsTo": "Board",
    }


def test_json_roster_missing_file(tmp_path):
    with pytest.raises(RosterUnavailableError):
        JsonRosterRepository(tmp_path / "absent.json").list_all()


def test_json_roster_entry_without_email(tmp_path):
    path = _write_roster(tmp_path, [{"fullName": "Ann", "reportsTo": "Board"}])
    with pytest.raises(RosterUnavailableError, match="email"):
        JsonRosterRepository(path).list_all()


def test_users_routes(client):
    users = client.get("/api/users").get_json()
    assert [u["fullName"] for u in users] == ["Alice", "Bob", "Carol", "Dave"]

    hierarchy = client.get("/api/users/hierarchy").get_json()
    assert hierarchy["root"] == "CEO"
    assert hierarchy["tree"][0]["fullName"] == "Alice"
    assert [r["fullName"] for r in hierarchy["tree"][0]["reports"]] == ["Bob", "Carol"]

    reports = client.get("/api/users/Bob/reports").get_json()
    assert [r["fullName"] for r in reports] == ["Dave"]
