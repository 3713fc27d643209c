"""Configuration, logging, store access and shared error handling."""
