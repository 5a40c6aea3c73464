"""Core permission domain: entities, value objects, protocols and exceptions."""
