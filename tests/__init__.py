"""Tests for pageframe."""
