import json

import pytest

from slabcut.parts import new_part, new_stock_sheet
from slabcut.project import new_project
from slabcut.project_io import (
    SharedProject,
    SharingError,
    export_gcode,
    export_shared,
    import_shared,
    load_project,
    save_project,
)


def test_save_and_load_project(tmp_path):
    path = tmp_path / "proj.cnccalc"
    proj = new_project()
    proj.name = "Desk"
    proj.parts.append(new_part("Top", 1200, 600, 1))
    proj.stocks.append(new_stock_sheet("Board", 2440, 1220, 2))
    proj.settings.kerf_width = 4.5

    save_project(path, proj)
    loaded = load_project(path)
    assert loaded.name == "Desk"
    assert [p.label for p in loaded.parts] == ["Top"]
    assert loaded.stocks[0].quantity == 2
    assert loaded.settings.kerf_width == 4.5
    assert loaded.result is None


def test_load_project_invalid_json(tmp_path):
    path = tmp_path / "bad.cnccalc"
    path.write_text("not json")
    with pytest.raises(ValueError):
        load_project(path)


def test_export_gcode(tmp_path):
    path = tmp_path / "out.nc"
    export_gcode(path, "G90\nG21\nM2\n")
    assert path.read_text() == "G90\nG21\nM2\n"


def test_export_shared_creates_file(tmp_path):
    path = tmp_path / "shared.slabshare"
    proj = new_project()
    proj.name = "Test Project"
    proj.parts.append(new_part("Shelf", 500, 300, 2))
    proj.stocks.append(new_stock_sheet("Board", 2440, 1220, 1))

    export_shared(path, proj, "Test User", "Shared for review")
    assert path.stat().st_size > 0


def test_export_and_import_shared_round_trip(tmp_path):
    path = tmp_path / "shared.slabshare"
    proj = new_project()
    proj.name = "My Cabinet"
    proj.parts.append(new_part("Side", 600, 400, 2))
    proj.parts.append(new_part("Top", 500, 300, 1))
    proj.stocks.append(new_stock_sheet("Plywood", 2440, 1220, 1))

    export_shared(path, proj, "Pascal", "For team review")
    imported = import_shared(path)

    assert imported.name == "My Cabinet"
    assert len(imported.parts) == 2
    assert len(imported.stocks) == 1
    assert imported.metadata.author == "Pascal"
    assert imported.metadata.notes == "For team review"
    assert imported.metadata.created_at != ""
    assert imported.metadata.shared_from == "Pascal"


def test_export_shared_leaves_original_untouched(tmp_path):
    proj = new_project()
    export_shared(tmp_path / "s.slabshare", proj, "Someone", "Notes")
    assert proj.metadata.author == ""
    assert proj.metadata.version == ""


def test_import_shared_plain_project(tmp_path):
    path = tmp_path / "plain.cnccalc"
    proj = new_project()
    proj.name = "Plain Project"
    proj.parts.append(new_part("Part A", 200, 100, 1))
    path.write_text(json.dumps(proj.to_dict(), indent=2))

    imported = import_shared(path)
    assert imported.name == "Plain Project"
    assert len(imported.parts) == 1
    assert imported.metadata.shared_from == ""


def test_import_shared_invalid_file(tmp_path):
    path = tmp_path / "invalid.json"
    path.write_text("not json")
    with pytest.raises(SharingError):
        import_shared(path)


def test_import_shared_file_not_found(tmp_path):
    with pytest.raises(SharingError):
        import_shared(tmp_path / "nonexistent" / "file.json")


def test_export_shared_metadata_populated(tmp_path):
    path = tmp_path / "meta.slabshare"
    proj = new_project()
    proj.name = "Meta Test"
    export_shared(path, proj, "Team Lead", "Review needed")

    shared = SharedProject.from_dict(json.loads(path.read_text()))
    assert shared.format_version == "1.0"
    assert shared.shared_by == "Team Lead"
    assert shared.shared_at != ""
    assert shared.project.metadata.version == "1.0"
    assert shared.project.name == "Meta Test"