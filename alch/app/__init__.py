"""Editor-side state: the saved color list and the current color."""

from .color_list import ColorList, ColorListEvent, CurrentColor

__all__ = ['ColorList', 'ColorListEvent', 'CurrentColor']
