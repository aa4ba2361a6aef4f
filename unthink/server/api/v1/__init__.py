"""Version 1 of the Unthink HTTP API."""
