"""Core auth domain: entities, value objects, ports and errors."""
