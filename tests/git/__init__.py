"""Tests for prscribe.git."""
