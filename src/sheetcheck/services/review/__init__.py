"""Review helpers: bulk status updates, filters, selections, summaries."""
