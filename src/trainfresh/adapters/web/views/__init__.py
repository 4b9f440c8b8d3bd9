"""LiveViews."""
