"""Service registry — status records and the refresh manager."""
