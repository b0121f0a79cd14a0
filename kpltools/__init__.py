"""Character classes, a source reader, a symbol table and data structures for KPL tools."""

__version__ = "0.1.0"