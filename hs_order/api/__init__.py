"""Order API client, response schemas and order operations."""
