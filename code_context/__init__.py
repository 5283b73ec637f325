"""Workspace lint rules and custom instructions for assistant prompts."""
