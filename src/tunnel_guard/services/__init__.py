from .ordered_window import OrderedWindow

__all__ = ["OrderedWindow"]
