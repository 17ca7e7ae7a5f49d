"""Tests for prscribe.server."""
