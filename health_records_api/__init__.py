"""
Top-level package for the Health Records API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``health_records_api.app.main:app``.
"""

__all__ = []
