"""Generic support libraries (output management, help rendering)."""
