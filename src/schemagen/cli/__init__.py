"""schemagen command line interface."""
