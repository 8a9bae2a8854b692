"""Integration tests for wiki2md.

These tests run saved article pages through the whole pipeline: loading
with BeautifulSoup, sanitizing, rendering, cleanup and frontmatter, and
the file-based entry points (HtmlDocument.from_file, the CLI).
"""
