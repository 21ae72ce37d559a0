"""Web framework adapters for normalized errors."""

from .handlers import register_exception_handlers, to_json_response

__all__ = ["register_exception_handlers", "to_json_response"]
