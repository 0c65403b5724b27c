"""HTTP routes for the SportClass API."""
