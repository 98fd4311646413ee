"""Settings and logging shared by the whole application."""
