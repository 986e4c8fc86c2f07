"""Runtime services shared by the tab strip packages."""
