"""Service containers and HTTP routes."""
