from .draw import component_layout, draw_components

__all__ = [
    "component_layout",
    "draw_components",
]
