"""BizHub listings engine: normalization, filtering, sorting and insights."""

__version__ = "0.1.0"
