# cli/schema/__init__.py
from .tools import register, validate_schemas, show_schema, find_schema_files, validate_schema_file

__all__ = ["register", "validate_schemas", "show_schema", "find_schema_files", "validate_schema_file"]
