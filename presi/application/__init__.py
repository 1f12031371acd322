"""Application layer: parsing, projections and generation helpers."""
