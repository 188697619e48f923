"""HTTP API for pushing fixes and reading live run status."""
