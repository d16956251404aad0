"""Core models and settings schema for site pagination."""
