"""Building blocks for a collaborative 2D CAD editor: view scaling, session wire format, console helpers, side-panel model, window geometry and frame colours."""

__version__ = "0.1.0"