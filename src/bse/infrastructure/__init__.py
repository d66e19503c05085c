"""Infrastructure layer: persistence and blob storage adapters."""
