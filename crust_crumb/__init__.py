"""
Crust & Crumb backend application.

This is the main application package that coordinates between:
- API routes (FastAPI endpoints)
- Services (glossary store and third-party API clients)
- Schemas (request/response and dataset models)
- Core (configuration, logging and shared exceptions)
"""

__version__ = "1.0.0"
