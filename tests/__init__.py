"""Tests for trainfresh."""
