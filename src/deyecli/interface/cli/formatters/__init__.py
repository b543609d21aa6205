from .result_formatters import ResponseFormatter, StatusFormatter

__all__ = ["ResponseFormatter", "StatusFormatter"]
