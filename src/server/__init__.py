"""HTTP server for blogsite."""
