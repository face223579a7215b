import pytest

from slabcut.offcut import (
    Offcut,
    detect_all_offcuts,
    detect_offcuts,
    total_offcut_area,
)
from slabcut.parts import OptimizeResult, Part, Placement, SheetResult, StockSheet


def _sheet(label, width, height, placements, price=0.0):
    return SheetResult(
        stock=StockSheet(label=label, width=width, height=height, price_per_sheet=price),
        placements=placements,
    )


def _placed(label, width, height, x=0.0, y=0.0):
    return Placement(part=Part(label=label, width=width, height=height), x=x, y=y)


def test_empty_sheet_is_one_offcut():
    offcuts = detect_offcuts(_sheet("Test", 2440, 1220, []), 0, 3.0)
    assert len(offcuts) == 1
    assert (offcuts[0].width, offcuts[0].height) == (2440, 1220)
    assert (offcuts[0].x, offcuts[0].y) == (0, 0)


def test_empty_sheet_carries_full_price():
    offcuts = detect_offcuts(_sheet("Test", 1000, 1000, [], price=40.0), 2, 0.0)
    assert offcuts[0].price_per_sheet == 40.0
    assert offcuts[0].sheet_index == 2


def test_right_strip():
    sheet = _sheet("Sheet1", 2440, 1220, [_placed("P1", 1000, 1220)])
    offcuts = detect_offcuts(sheet, 0, 3.0)
    assert any(o.x > 900 and o.width > 1000 for o in offcuts)
    right = offcuts[0]
    assert right.x == pytest.approx(1003)
    assert right.width == pytest.approx(1437)
    assert right.height == 1220
    assert right.sheet_label == "Sheet1"


def test_bottom_strip():
    sheet = _sheet("Sheet1", 2440, 1220, [_placed("P1", 2440, 500)])
    offcuts = detect_offcuts(sheet, 0, 3.0)
    assert any(o.y > 400 and o.height > 600 for o in offcuts)
    bottom = [o for o in offcuts if o.y > 400][0]
    assert bottom.y == pytest.approx(503)
    assert bottom.height == pytest.approx(717)
    assert bottom.width == 2440


def test_small_remnant_ignored():
    sheet = _sheet("Sheet1", 500, 500, [_placed("P1", 480, 480)])
    assert detect_offcuts(sheet, 0, 3.0) == []


def test_detect_all_offcuts():
    result = OptimizeResult(
        sheets=[
            _sheet("S1", 2440, 1220, [_placed("P1", 1000, 600)]),
            _sheet("S2", 2440, 1220, [_placed("P2", 500, 400)]),
        ]
    )
    offcuts = detect_all_offcuts(result, 3.0)
    assert len(offcuts) > 0
    assert {o.sheet_index for o in offcuts} == {0, 1}
    assert {o.sheet_label for o in offcuts} == {"S1", "S2"}


def test_offcut_area():
    assert Offcut(width=500, height=300).area() == 150000


def test_offcut_to_stock_sheet():
    offcut = Offcut(id="abc", sheet_label="Plywood", width=800, height=400, price_per_sheet=12.50)
    sheet = offcut.to_stock_sheet()
    assert (sheet.width, sheet.height) == (800, 400)
    assert sheet.price_per_sheet == 12.50
    assert sheet.quantity == 1
    assert sheet.label == "Offcut Plywood"


def test_total_offcut_area():
    offcuts = [Offcut(width=500, height=300), Offcut(width=200, height=100)]
    assert total_offcut_area(offcuts) == 500 * 300 + 200 * 100.0


def test_pricing_proportional_and_sorted():
    sheet = _sheet("Sheet1", 2000, 1000, [_placed("P1", 1000, 500)], price=100.0)
    offcuts = detect_offcuts(sheet, 0, 0)
    assert all(o.price_per_sheet > 0 for o in offcuts)
    assert [o.area() for o in offcuts] == [1_000_000, 500_000]
    assert offcuts[0].price_per_sheet == pytest.approx(50.0)
    assert offcuts[1].price_per_sheet == pytest.approx(25.0)


def test_offcut_dict_round_trip():
    offcut = Offcut(id="x1", sheet_label="S", sheet_index=3, x=1, y=2, width=3, height=4,
                    price_per_sheet=5.5)
    assert Offcut.from_dict(offcut.to_dict()) == offcut