"""Filtered todo list engine with a NiceGUI front end."""

__version__ = "0.1.0"
