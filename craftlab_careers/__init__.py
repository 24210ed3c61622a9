"""Craftlab Careers matching core: profile-to-opportunity scoring and backend access."""

__version__ = "0.1.0"
