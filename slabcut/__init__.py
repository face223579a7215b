"""Cut-list data model, calculators and JSON storage for sheet-material CNC work."""

__version__ = "0.1.0"