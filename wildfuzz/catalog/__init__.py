"""YAML pattern catalogs and CSV batch matching."""
