"""Domain layer for the management bounded context."""
