"""Snippetbox: share short-lived text snippets."""
