"""SVG chart rendering for the incubator business dashboard."""

__version__ = "0.1.0"
