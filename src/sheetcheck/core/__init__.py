"""Core configuration, errors, protocols and clocks."""
