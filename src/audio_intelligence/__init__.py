"""audio-intelligence -- terminal mockup of an audio intelligence workbench."""

__version__ = '0.3.0'
