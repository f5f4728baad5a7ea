from icaomrz.schemas.registry import Schema, get_schema, list_schemas, register_schema

from . import french_id, mrv, passport, slovak, td1, td2  # noqa: F401

__all__ = ["Schema", "get_schema", "list_schemas", "register_schema"]
