"""Tests for prscribe.cli."""
