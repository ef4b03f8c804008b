"""chesslite: simplified chess rules engine with a tiered computer opponent."""

__version__ = "0.1.0"
