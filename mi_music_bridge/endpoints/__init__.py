"""HTTP routers for the native bridge."""
