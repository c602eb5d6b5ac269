"""Runtime services shared by every plugin component."""
