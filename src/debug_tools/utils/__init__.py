"""Configuration loading and drawing helpers."""
