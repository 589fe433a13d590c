from .logging import log_calls

__all__ = ["log_calls"]
