import pytest

from slabcut.inventory import (
    Inventory,
    StockPreset,
    ToolProfile,
    default_inventory,
    new_stock_preset,
    new_tool_profile,
)
from slabcut.settings import default_settings


def test_new_stock_preset_with_price():
    sp = new_stock_preset("Plywood 8x4", 2440, 1220, "Plywood", 45.99)
    assert sp.price_per_sheet == 45.99
    assert sp.name == "Plywood 8x4"
    assert sp.material == "Plywood"


def test_to_stock_sheet_carries_price():
    sp = new_stock_preset("MDF 8x4", 2440, 1220, "MDF", 32.50)
    sheet = sp.to_stock_sheet(2)
    assert sheet.price_per_sheet == 32.50
    assert sheet.quantity == 2


def test_new_stock_preset_default_zero_price():
    sp = new_stock_preset("No Price", 1000, 500, "Wood")
    assert sp.price_per_sheet == 0


def test_new_stock_preset_has_short_unique_id():
    a = new_stock_preset("A", 1, 1, "X")
    b = new_stock_preset("B", 1, 1, "X")
    assert len(a.id) == 8
    assert a.id != b.id


def test_tool_profile_apply_to_settings():
    tp = ToolProfile(
        tool_diameter=3.0,
        feed_rate=1000,
        plunge_rate=300,
        spindle_speed=20000,
        safe_z=10.0,
        cut_depth=12.0,
        pass_depth=3.0,
    )
    settings = default_settings()
    tp.apply_to_settings(settings)
    assert settings.tool_diameter == 3.0
    assert settings.feed_rate == 1000
    assert settings.spindle_speed == 20000
    assert settings.safe_z == 10.0
    assert settings.pass_depth == 3.0
    assert settings.kerf_width == 3.0


def test_stock_preset_to_stock_sheet():
    sp = new_stock_preset("Plywood 2440x1220", 2440, 1220, "Plywood")
    sheet = sp.to_stock_sheet(3)
    assert sheet.width == 2440
    assert sheet.height == 1220
    assert sheet.quantity == 3
    assert sheet.label == "Plywood 2440x1220"
    assert sheet.thickness == 18


def test_inventory_find_by_name():
    inv = default_inventory()
    tool = inv.find_tool_by_name("6mm End Mill")
    assert tool is not None
    assert tool.tool_diameter == 6.0
    assert inv.find_tool_by_name("Nonexistent Tool") is None

    stock = inv.find_stock_by_name("Plywood 2440x1220 (8'x4')")
    assert stock is not None
    assert stock.material == "Plywood"
    assert inv.find_stock_by_name("Nonexistent Stock") is None


def test_inventory_tool_and_stock_names():
    inv = default_inventory()
    assert len(inv.tool_names()) == len(inv.tools)
    assert len(inv.stock_names()) == len(inv.stocks)
    assert inv.tool_names()[0] == "6mm End Mill"
    assert inv.stock_names()[-1] == "Aluminium 600x300"


def test_default_inventory_contents():
    inv = default_inventory()
    assert len(inv.tools) == 5
    assert len(inv.stocks) == 6
    assert inv.tools[2].tool_diameter == 6.35
    assert inv.stocks[2].width == 1220 and inv.stocks[2].height == 610


@pytest.mark.parametrize(
    "slot, expected",
    [(0, "Router Bit"), (3, "T3 - Router Bit")],
)
def test_display_name(slot, expected):
    tp = ToolProfile(name="Router Bit", slot_number=slot)
    assert tp.display_name() == expected


def test_find_tool_by_display_name():
    inv = Inventory(tools=[ToolProfile(id="t1", name="Bit", slot_number=2)])
    found = inv.find_tool_by_name("T2 - Bit")
    assert found is not None
    assert found.id == "t1"
    assert inv.tool_names() == ["T2 - Bit"]


def test_find_by_id_returns_stored_object():
    inv = default_inventory()
    tool = inv.find_tool_by_id(inv.tools[1].id)
    assert tool is inv.tools[1]
    stock = inv.find_stock_by_id(inv.stocks[3].id)
    assert stock is inv.stocks[3]
    assert inv.find_tool_by_id("missing") is None
    assert inv.find_stock_by_id("missing") is None


def test_new_tool_profile_fields():
    tp = new_tool_profile("Mill", 6.0, 1500, 500, 18000, 5.0, 18.0, 6.0)
    assert tp.slot_number == 0
    assert tp.spindle_speed == 18000
    assert tp.cut_depth == 18.0
    assert len(tp.id) == 8


def test_inventory_dict_round_trip():
    inv = default_inventory()
    inv.tools[0].slot_number = 4
    inv.stocks[0].price_per_sheet = 12.5
    restored = Inventory.from_dict(inv.to_dict())
    assert restored == inv


def test_from_dict_with_missing_fields():
    inv = Inventory.from_dict({"tools": [{"name": "X"}]})
    assert inv.tools == [ToolProfile(name="X")]
    assert inv.stocks == []
    assert StockPreset.from_dict({}) == StockPreset()


def test_tool_profile_to_dict_keys():
    data = ToolProfile(id="a", name="b", slot_number=1).to_dict()
    assert data["slot_number"] == 1
    assert set(data) == {
        "id",
        "name",
        "slot_number",
        "tool_diameter",
        "feed_rate",
        "plunge_rate",
        "spindle_speed",
        "safe_z",
        "cut_depth",
        "pass_depth",
    }