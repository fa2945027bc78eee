"""HTTP diagnostics API."""
