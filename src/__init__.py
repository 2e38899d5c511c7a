"""Net worth tracker package."""
