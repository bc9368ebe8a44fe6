"""Vehicle API protected by a JWT authentication filter."""
