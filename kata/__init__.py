"""Load, compile, run and check programming exercises, with reference lesson solutions."""

__version__ = "5.3.0"