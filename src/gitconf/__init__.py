"""Typed access to git configuration through the git command line."""
