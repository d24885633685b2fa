"""Option resolver public API."""
from .naming import FunctionName, derive, function_name
from .options import OptionResolver, compute_suffix, resolve
from .selectors import SelectorInput, expand_shorthand, filter_operations, parse_selector

__all__ = [
    "FunctionName",
    "OptionResolver",
    "SelectorInput",
    "compute_suffix",
    "derive",
    "expand_shorthand",
    "filter_operations",
    "function_name",
    "parse_selector",
    "resolve",
]
