"""Configuration and utilities."""
