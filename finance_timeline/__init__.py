"""Personal finance timeline aggregation and budget variance engine."""
