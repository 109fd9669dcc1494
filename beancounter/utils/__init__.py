"""Configuration loading, constants and text rendering helpers."""
