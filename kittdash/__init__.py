"""State models of dashboard widgets: buttons, indicators, gauges, displays and popups."""

__version__ = "0.1.0"