"""Health metrics engine and shared infrastructure."""
