"""Configuration, logging and error reporting setup."""
