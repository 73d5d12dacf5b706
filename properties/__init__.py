"""
properties package

Tool panel for the template palette, text defaults and the selected annotation.
"""

from properties.dock import ToolPanel

__all__ = ["ToolPanel"]
