"""Test suite for the flexai package."""
