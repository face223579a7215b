import pytest

from slabcut.edgebanding import calculate_edge_banding, calculate_per_part_edge_banding
from slabcut.parts import EdgeBanding, Part


def _sample_parts():
    return [
        Part(label="Shelf", width=800, height=300, quantity=4,
             edge_banding=EdgeBanding(top=True, bottom=True)),
        Part(label="Side", width=600, height=400, quantity=2,
             edge_banding=EdgeBanding(top=True, left=True, right=True)),
        Part(label="Back", width=500, height=300, quantity=1),
    ]


def test_calculate_edge_banding_no_parts():
    summary = calculate_edge_banding(None, 10.0)
    assert summary.total_linear_mm == 0
    assert summary.part_count == 0


def test_calculate_edge_banding_no_edges():
    parts = [Part(label="P1", width=100, height=100, quantity=5)]
    summary = calculate_edge_banding(parts, 15.0)
    assert summary.total_linear_mm == 0
    assert summary.edge_count == 0


def test_calculate_edge_banding_zero_waste():
    parts = [Part(width=100, height=50, quantity=1, edge_banding=EdgeBanding(left=True))]
    summary = calculate_edge_banding(parts, 0)
    assert summary.total_with_waste_mm == 50.0


def test_calculate_per_part_edge_banding():
    parts = [
        Part(label="Shelf", width=800, height=300, quantity=4,
             edge_banding=EdgeBanding(top=True)),
        Part(label="No banding", width=500, height=500, quantity=1),
    ]
    breakdown = calculate_per_part_edge_banding(parts)
    assert len(breakdown) == 1
    entry = breakdown[0]
    assert entry.label == "Shelf"
    assert entry.length_per_unit == 800
    assert entry.total_length == 3200
    assert entry.edges == "T"


def test_per_part_to_dict():
    parts = [Part(label="S", width=10, height=20, quantity=2,
                  edge_banding=EdgeBanding(left=True, right=True))]
    data = calculate_per_part_edge_banding(parts)[0].to_dict()
    assert data == {
        "label": "S",
        "width": 10,
        "height": 20,
        "quantity": 2,
        "edges": "L+R",
        "length_per_unit": 40.0,
        "total_length": 80.0,
    }


def test_per_part_empty_input():
    assert calculate_per_part_edge_banding([]) == []


def test_summary_to_dict():
    data = calculate_edge_banding([], 5.0).to_dict()
    assert data["waste_percent"] == 5.0
    assert data["total_linear_mm"] == 0