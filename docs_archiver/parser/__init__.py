"""Parsers for the structured data embedded in documentation pages."""
