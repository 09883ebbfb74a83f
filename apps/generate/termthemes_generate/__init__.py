"""Command line front end for the termthemes catalog generator."""
