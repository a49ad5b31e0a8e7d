"""Virtual filesystem surface.

This module adapts table records and host files into readable, statable
handles, and selects embedded or local storage behind one facade.
"""
