"""Conference sessions API: in-memory CRUD over scheduled conference talks."""

__version__ = "0.1.0"
