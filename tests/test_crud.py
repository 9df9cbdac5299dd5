# tests/test_crud.py
from __future__ import annotations

import time

from qr_api.db import crud
from qr_api.db.models import Project

MISSING_ID = "00000000-0000-0000-0000-000000000000"


def _tick() -> None:
    # timestamps have millisecond resolution
    time.sleep(0.01)


# -----------------------------------------------------------------------------
# Projects
# -----------------------------------------------------------------------------
def test_create_project_applies_defaults(db_session):
    p = crud.create_project(db_session, {})

    assert len(p.id) == 36
    assert p.name == "Untitled QR"
    assert p.original_url == ""
    assert p.shorten_enabled == 0
    assert p.short_url is None
    assert p.recipe_json == "{}"
    assert p.logo_filename is None
    assert p.folder_id is None
    assert p.created_at == p.updated_at
    assert p.created_at.endswith("Z")


def test_get_project_returns_created_record(db_session):
    created = crud.create_project(
        db_session,
        {
            "name": "Test",
            "original_url": "https://example.com",
            "shorten_enabled": 1,
            "short_url": "https://mifi.me/abc",
            "recipe_json": '{"dotsOptions":{"color":"#000"}}',
            "logo_filename": "logo.png",
        },
    )

    got = crud.get_project(db_session, created.id)

    assert got is not None
    assert got.name == "Test"
    assert got.original_url == "https://example.com"
    assert got.shorten_enabled == 1
    assert got.short_url == "https://mifi.me/abc"
    assert got.recipe_json == '{"dotsOptions":{"color":"#000"}}'
    assert got.logo_filename == "logo.png"
    assert got.created_at == created.created_at


def test_list_projects_newest_first_and_light(db_session):
    a = crud.create_project(db_session, {"name": "A", "recipe_json": '{"x":1}'})
    _tick()
    b = crud.create_project(db_session, {"name": "B"})

    rows = crud.list_projects(db_session)

    assert [r.name for r in rows] == ["B", "A"]
    assert [r.id for r in rows] == [b.id, a.id]
    assert set(rows[0]._fields) == {
        "id", "name", "created_at", "updated_at", "logo_filename", "folder_id",
    }


def test_list_projects_update_moves_to_front(db_session):
    a = crud.create_project(db_session, {"name": "A"})
    _tick()
    crud.create_project(db_session, {"name": "B"})
    _tick()
    crud.update_project(db_session, a.id, {"name": "A2"})

    assert [r.name for r in crud.list_projects(db_session)] == ["A2", "B"]


def test_update_project_changes_given_fields(db_session):
    p = crud.create_project(db_session, {"name": "Old", "original_url": "https://a.com"})

    updated = crud.update_project(db_session, p.id, {"name": "New", "recipe_json": '{"x":1}'})

    assert updated.name == "New"
    assert updated.recipe_json == '{"x":1}'
    assert updated.original_url == "https://a.com"


def test_update_project_empty_patch_only_touches_updated_at(db_session):
    p = crud.create_project(
        db_session,
        {"name": "Keep", "shorten_enabled": 1, "short_url": "s", "logo_filename": "l.png"},
    )
    before = {
        "name": p.name,
        "original_url": p.original_url,
        "shorten_enabled": p.shorten_enabled,
        "short_url": p.short_url,
        "recipe_json": p.recipe_json,
        "logo_filename": p.logo_filename,
        "folder_id": p.folder_id,
        "created_at": p.created_at,
    }
    old_updated_at = p.updated_at
    _tick()

    updated = crud.update_project(db_session, p.id, {})

    assert updated.updated_at > old_updated_at
    for key, value in before.items():
        assert getattr(updated, key) == value


def test_update_project_explicit_null_clears_and_absence_keeps(db_session):
    folder = crud.create_folder(db_session, {"name": "F"})
    p = crud.create_project(
        db_session,
        {"logo_filename": "logo.png", "short_url": "https://mifi.me/x", "folder_id": folder.id},
    )

    cleared = crud.update_project(db_session, p.id, {"logo_filename": None})
    assert cleared.logo_filename is None
    assert cleared.short_url == "https://mifi.me/x"
    assert cleared.folder_id == folder.id

    later = crud.update_project(db_session, p.id, {"name": "Renamed"})
    assert later.logo_filename is None

    unlinked = crud.update_project(db_session, p.id, {"folder_id": None, "short_url": None})
    assert unlinked.folder_id is None
    assert unlinked.short_url is None


def test_update_project_null_for_required_field_is_ignored(db_session):
    p = crud.create_project(db_session, {"name": "Stay"})

    updated = crud.update_project(db_session, p.id, {"name": None, "shorten_enabled": None})

    assert updated.name == "Stay"
    assert updated.shorten_enabled == 0


def test_delete_project(db_session):
    p = crud.create_project(db_session, {"name": "Del"})

    assert crud.delete_project(db_session, p.id) is True
    assert crud.get_project(db_session, p.id) is None
    assert crud.delete_project(db_session, p.id) is False


def test_missing_project_is_none_not_error(db_session):
    assert crud.get_project(db_session, MISSING_ID) is None
    assert crud.update_project(db_session, MISSING_ID, {"name": "X"}) is None
    assert crud.delete_project(db_session, MISSING_ID) is False
    assert crud.list_projects(db_session) == []


# -----------------------------------------------------------------------------
# Folders
# -----------------------------------------------------------------------------
def test_create_folder_defaults_append_to_end(db_session):
    f1 = crud.create_folder(db_session, {})
    f2 = crud.create_folder(db_session, {"name": "Second"})
    f3 = crud.create_folder(db_session, {"name": "Pinned", "sort_order": 0})

    assert f1.name == "Folder"
    assert f1.sort_order == 0
    assert f2.sort_order == 1
    assert f3.sort_order == 0


def test_list_folders_sorted_by_order_then_name(db_session):
    crud.create_folder(db_session, {"name": "Zeta", "sort_order": 1})
    crud.create_folder(db_session, {"name": "Beta", "sort_order": 1})
    crud.create_folder(db_session, {"name": "Alpha", "sort_order": 2})
    crud.create_folder(db_session, {"name": "Omega", "sort_order": 0})

    assert [f.name for f in crud.list_folders(db_session)] == ["Omega", "Beta", "Zeta", "Alpha"]


def test_update_folder_retains_absent_fields(db_session):
    f = crud.create_folder(db_session, {"name": "F", "sort_order": 5})

    renamed = crud.update_folder(db_session, f.id, {"name": "G"})
    assert (renamed.name, renamed.sort_order) == ("G", 5)

    moved = crud.update_folder(db_session, f.id, {"sort_order": 0})
    assert (moved.name, moved.sort_order) == ("G", 0)

    assert crud.update_folder(db_session, MISSING_ID, {"name": "X"}) is None
    assert crud.get_folder(db_session, MISSING_ID) is None


def test_delete_folder_detaches_projects(db_session):
    folder = crud.create_folder(db_session, {"name": "Work"})
    other = crud.create_folder(db_session, {"name": "Other"})
    inside = [crud.create_project(db_session, {"name": f"P{i}", "folder_id": folder.id}) for i in range(3)]
    elsewhere = crud.create_project(db_session, {"name": "Q", "folder_id": other.id})

    assert crud.delete_folder(db_session, folder.id) is True

    for p in inside:
        got = crud.get_project(db_session, p.id)
        assert got is not None
        assert got.folder_id is None
    assert crud.get_project(db_session, elsewhere.id).folder_id == other.id
    assert [f.id for f in crud.list_folders(db_session)] == [other.id]


def test_delete_missing_folder_returns_false(db_session):
    assert crud.delete_folder(db_session, MISSING_ID) is False


def test_list_projects_ties_break_on_created_at_then_id(db_session):
    same = "2026-01-01T00:00:00.000Z"
    rows = [
        Project(id="aaaaaaaa-0000-0000-0000-000000000000", name="old-a",
                created_at="2025-01-01T00:00:00.000Z", updated_at=same),
        Project(id="cccccccc-0000-0000-0000-000000000000", name="old-c",
                created_at="2025-01-01T00:00:00.000Z", updated_at=same),
        Project(id="bbbbbbbb-0000-0000-0000-000000000000", name="young",
                created_at="2025-06-01T00:00:00.000Z", updated_at=same),
        Project(id="dddddddd-0000-0000-0000-000000000000", name="stale",
                created_at="2025-12-01T00:00:00.000Z",
                updated_at="2025-12-01T00:00:00.000Z"),
    ]
    db_session.add_all(rows)
    db_session.commit()

    names = [r.name for r in crud.list_projects(db_session)]

    assert names == ["young", "old-c", "old-a", "stale"]
