"""Application layer: services, commands, queries and their DTOs."""
