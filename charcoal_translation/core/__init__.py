"""Settings, logging, errors and shared helpers for the translation layer."""
