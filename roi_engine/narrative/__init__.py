from .formatting import CurrencyFormatter, format_fixed
from .interpretation import format_metrics_table, generate_interpretation

__all__ = [
    "CurrencyFormatter",
    "format_fixed",
    "generate_interpretation",
    "format_metrics_table",
]
