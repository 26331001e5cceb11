"""Logging configuration and helpers for jsonprettifier."""
