"""railgfx - terminal editor for Star Rail graphics settings."""

__version__ = "0.1.0"
