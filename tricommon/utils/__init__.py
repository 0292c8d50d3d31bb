# tricommon/utils/__init__.py
"""
The `utils` package holds the toolkit's cross-cutting plumbing: configuration
loading, logger setup and the output sinks every printing operation writes to.
"""
