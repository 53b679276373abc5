"""Command line front end for ferrite-lint."""
