"""
Top‑level package for the Lessons Marketplace API.

This file makes ``lessons_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``lessons_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
