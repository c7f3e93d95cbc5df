"""API endpoint routers."""
