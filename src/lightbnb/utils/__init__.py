"""Shared utilities for LightBnB."""
