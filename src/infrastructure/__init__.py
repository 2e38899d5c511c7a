"""Infrastructure adapters: storage, settings and logging."""
