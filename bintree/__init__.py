"""Binary tree nodes with parent links, measurements, traversals and ASCII printing."""

__version__ = "0.1.0"
__all__ = ["tree", "printing", "demo"]