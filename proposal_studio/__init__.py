"""Proposal Studio: AI-assisted pricing proposals."""

__version__ = "1.0.0"
