"""Config – engine settings and their loaders."""
