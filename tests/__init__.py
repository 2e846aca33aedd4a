"""Test package for interview-sources."""
