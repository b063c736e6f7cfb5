"""Resume ATS web API."""
