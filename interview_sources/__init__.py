"""Citation-backed search over a docassemble reference corpus."""

__version__ = "1.0.0"
