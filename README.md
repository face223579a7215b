# slabcut

`slabcut` is a library for planning cuts from sheet material such as plywood,
MDF or acrylic on a CNC router or panel saw. It holds the data model, some
calculators, and JSON storage for everything involved.

## Modules

| Module | What it holds |
| --- | --- |
| `slabcut.geometry` | `Point2D`, `Outline` (bounding box, translate, rotate, perimeter, area, point-in-polygon) and `outlines_overlap` |
| `slabcut.settings` | `CutSettings` and `default_settings()`, with `PlungeType`, `CornerOvercut`, `Algorithm`, `OptimizeWeights`, `StockTabConfig`, `TabZone`, `ClampZone` and `DustShoeCollision` |
| `slabcut.parts` | `Part`, `StockSheet`, `EdgeBanding`, `Grain`, `CutoutRect`, `Placement`, `SheetResult`, `OptimizeResult`, plus `new_part`, `new_stock_sheet` and `can_place_with_grain` |
| `slabcut.profiles` | `GCodeProfile`, the built-in Grbl, Mach3, LinuxCNC and Generic profiles, `ProfileRegistry`, and module-level `get_profile`, `get_profile_names`, `all_profiles`, `add_custom_profile`, `remove_custom_profile` and `new_custom_profile` |
| `slabcut.project` | `Project`, `ProjectMetadata` and `new_project()` |
| `slabcut.appconfig` | `AppConfig` and `default_app_config()` |
| `slabcut.calculator` | `calculate_purchase_estimate`, which returns a `PurchaseEstimate` |
| `slabcut.edgebanding` | `calculate_edge_banding` and `calculate_per_part_edge_banding` |
| `slabcut.inventory` | `Inventory`, `ToolProfile`, `StockPreset` and `default_inventory()` |
| `slabcut.library` | `PartsLibrary`, `LibraryPart`, with search and category filtering |
| `slabcut.offcut` | `Offcut`, `detect_offcuts`, `detect_all_offcuts` and `total_offcut_area` |
| `slabcut.template` | `ProjectTemplate`, `TemplateStore` and `new_project_template` |
| `slabcut.config_io` | load and save of `AppConfig`, and `export_all_data` / `import_all_data` backups |
| `slabcut.inventory_io` | load, save, export and merging import of the inventory |
| `slabcut.library_io` | load and save of the parts library |
| `slabcut.profiles_io` | load and save of custom profiles, and export / import of single profiles |
| `slabcut.project_io` | `save_project`, `load_project`, `export_gcode`, and `export_shared` / `import_shared` |
| `slabcut.templates_io` | load and save of the template store |

Every data class has `to_dict()`. Most also have a `from_dict()` classmethod,
and these are what the JSON files are built from.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from slabcut.parts import new_part
from slabcut.calculator import calculate_purchase_estimate
from slabcut.edgebanding import calculate_edge_banding

shelf = new_part("Shelf", 800, 300, 6)
shelf.edge_banding.top = True

estimate = calculate_purchase_estimate([shelf], 2440, 1220, 3.2, 15.0, 45.0)
print(estimate.sheets_with_waste, estimate.estimated_cost)

banding = calculate_edge_banding([shelf], 10.0)
print(banding.total_with_waste_m, "m of banding")
```

Saving and loading a project:

```python
from slabcut.project import new_project
from slabcut.project_io import save_project, load_project

project = new_project()
project.name = "Bookcase"
save_project("bookcase.json", project)
restored = load_project("bookcase.json")
```

Custom G-code profiles:

```python
from slabcut.profiles import ProfileRegistry, new_custom_profile

registry = ProfileRegistry()
profile = new_custom_profile("My Router")
registry.add_custom(profile)
print(registry.names())  # built-in profiles first, then "My Router"
print(registry.get("Unknown").name)  # unknown names fall back to "Generic"
```

## File locations

The default files live under `~/.slabcut/`:

| File | Contents | If missing |
| --- | --- | --- |
| `config.json` | application config | `load_app_config` returns the defaults |
| `inventory.json` | tool and stock inventory | `load_inventory` writes and returns the default inventory |
| `parts_library.json` | parts library | `load_library` returns an empty library |
| `templates.json` | project templates | `load_templates` returns an empty store |

Custom G-code profiles are kept in `profiles.json`, inside the `slabcut`
directory under your user configuration directory. That directory is
`%APPDATA%` on Windows, `~/Library/Application Support` on macOS, and
`$XDG_CONFIG_HOME` or `~/.config` elsewhere. If the file is missing,
`load_custom_profiles` returns an empty list.

## Errors

Errors are raised as exceptions:

- A file that cannot be read raises `OSError`. `load_project` raises
  `FileNotFoundError` for a missing file.
- Malformed JSON raises `ValueError`.
- `slabcut.profiles.ProfileError` (a `ValueError`) is raised in two cases: when
  you add a custom profile whose name belongs to a built-in profile, and when you
  remove a built-in profile or one that does not exist.
- `slabcut.profiles_io.ProfileFileError` (a `ValueError`) is raised for a profile
  file that is malformed or has no name.
- `slabcut.config_io.BackupError` is raised when a backup cannot be written, read
  or parsed, or when it has no version.
- `slabcut.project_io.SharingError` is raised when a shared project cannot be
  written, read or parsed.

## What this package does not do

The package has no part-nesting optimizer. `OptimizeResult` and `SheetResult`
only describe a layout, and you must build them yourself or load them from a
project file. It has no G-code generator either: `export_gcode` only writes a
string you supply to a file. The package also has no graphical interface, no
command-line tool, and no PDF, spreadsheet, DXF or label export.