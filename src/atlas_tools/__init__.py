"""
atlas-tools: typed client and CLI for MongoDB Atlas third-party integrations.

This package provides:
- A thin Atlas Administration API client with digest authentication
- A service binding for the project integrations resource
- The `atlas` CLI for managing integrations from the terminal
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
