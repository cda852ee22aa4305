"""Supervisor configuration loading, a one-shot control prompt and an XML-RPC demo."""

__version__ = "0.1.0"