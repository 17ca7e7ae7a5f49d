"""Tests for prscribe.git.pr_generator."""
