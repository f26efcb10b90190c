from .handlers import http_error_handler, register_exception_handlers
from .validation import require_fields

__all__ = ["http_error_handler", "register_exception_handlers", "require_fields"]
