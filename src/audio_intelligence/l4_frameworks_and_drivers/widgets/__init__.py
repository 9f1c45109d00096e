"""Textual widgets for the audio intelligence workbench."""
