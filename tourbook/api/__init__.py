"""HTTP API: routers, dependencies and the application factory."""
