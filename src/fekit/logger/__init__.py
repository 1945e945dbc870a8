"""Logging setup for fekit."""
