"""Route decorators translating use case results into HTTP responses."""

from interfaces.api.middleware.error_handler import handle_use_case_errors

__all__ = ["handle_use_case_errors"]
