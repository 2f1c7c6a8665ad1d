"""dbgc: toggle diagnostic print statements across a source tree."""

__version__ = "0.3.0"
