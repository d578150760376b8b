"""
Top‑level package for the Bookshelf API.

This file makes ``bookshelf_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``bookshelf_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
