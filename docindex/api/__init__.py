"""HTTP API: routers, dependency providers and exception handlers."""
