"""CSV ingest: header normalization, destringing, parsing."""
