"""Record exporters."""
