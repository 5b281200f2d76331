"""Conversion and status logic."""
