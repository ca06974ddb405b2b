"""Wire-format schemas for the remote holdings endpoint."""
