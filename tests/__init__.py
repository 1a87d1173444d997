"""Tests for bowergate."""
