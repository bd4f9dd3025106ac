"""Infrastructure layer: API client, session handling."""
