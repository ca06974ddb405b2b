"""Core utilities: exceptions and clock helpers."""
