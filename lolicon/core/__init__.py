"""Configuration, identity objects and permission checks."""
