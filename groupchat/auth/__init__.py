"""Session authentication for the API."""
