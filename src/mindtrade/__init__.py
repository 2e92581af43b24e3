"""MindTrade: investing dashboard backend with a behavioral decision journal."""

__version__ = "0.1.0"
