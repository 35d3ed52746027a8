"""Crawl engine: frontier controller, link sources and page fetching."""
