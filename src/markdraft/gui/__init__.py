"""
PySide6 presentation layer. Thin: translates key events into logical
keys for the drafting session and redraws from session state.
"""
