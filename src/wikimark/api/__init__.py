"""Command line surface for wikimark."""
