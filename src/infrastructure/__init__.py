"""Infrastructure adapters: persistence, feeds, clients, settings."""
