"""
Pydantic models describing the toolkit's configuration.
"""
