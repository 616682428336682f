"""Keeps a local CLAUDE.md in sync with a template repository on GitHub."""
