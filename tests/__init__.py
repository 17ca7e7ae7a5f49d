"""Tests for prscribe."""
