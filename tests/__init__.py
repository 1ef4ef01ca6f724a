"""
Test suite for Livshjulet.

This package contains:
- Unit tests for the interaction engine, settings and export pipeline
- Integration tests for complete hover/commit/export workflows
- Fakes for testing without a real clipboard, file dialog or timers
"""
