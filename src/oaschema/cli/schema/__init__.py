# cli/schema/__init__.py
from .tools import register, show_schema, load_node, load_schema

__all__ = ["register", "show_schema", "load_node", "load_schema"]
