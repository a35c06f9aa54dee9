"""Command-line entry points (skriv-analyze, skriv-translate, skriv-check-catalogs)."""
