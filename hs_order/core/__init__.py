"""Configuration, logging, errors, retry policy and formatting helpers."""
