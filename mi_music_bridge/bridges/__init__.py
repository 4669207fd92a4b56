"""Platform bridge implementations."""
