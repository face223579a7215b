"""Reading, writing and merging the tool and stock inventory file."""

import json
import os
from pathlib import Path
from typing import Any, Tuple, Union

from slabcut.inventory import Inventory, default_inventory

PathLike = Union[str, "os.PathLike[str]"]


def _write_json(path: PathLike, data: Any) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _read_inventory(path: PathLike) -> Inventory:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("inventory file does not hold a JSON object")
    return Inventory.from_dict(data)


def default_inventory_path() -> str:
    """``~/.slabcut/inventory.json``."""
    return str(Path.home() / ".slabcut" / "inventory.json")


def save_inventory(path: PathLike, inventory: Inventory) -> None:
    """Write the inventory as JSON, creating missing directories."""
    _write_json(path, inventory.to_dict())


def load_inventory(path: PathLike) -> Inventory:
    """Read the inventory; a missing file is created with the default inventory."""
    try:
        return _read_inventory(path)
    except FileNotFoundError:
        inventory = default_inventory()
        save_inventory(path, inventory)
        return inventory


def load_or_create_inventory() -> Tuple[Inventory, str]:
    """Load the inventory from the default path; return it with that path."""
    path = default_inventory_path()
    return load_inventory(path), path


def export_inventory(path: PathLike, inventory: Inventory) -> None:
    save_inventory(path, inventory)


def import_inventory(path: PathLike, existing: Inventory) -> Inventory:
    """Merge the inventory in ``path`` into ``existing``, skipping IDs already present."""
    imported = _read_inventory(path)

    tools = list(existing.tools)
    tool_ids = {t.id for t in tools}
    for tool in imported.tools:
        if tool.id not in tool_ids:
            tools.append(tool)
            tool_ids.add(tool.id)

    stocks = list(existing.stocks)
    stock_ids = {s.id for s in stocks}
    for stock in imported.stocks:
        if stock.id not in stock_ids:
            stocks.append(stock)
            stock_ids.add(stock.id)

    return Inventory(tools=tools, stocks=stocks)