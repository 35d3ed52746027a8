# docs_archiver/__init__.py
"""
docs_archiver package initializer.
Defines package version.
"""
__version__ = "0.1.0"
