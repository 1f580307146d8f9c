"""Command line interface for lh-avg."""
