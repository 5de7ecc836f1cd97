"""Panels shown by the main window."""
