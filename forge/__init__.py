"""Utility Forge: turn a short tool request into a generated micro-tool."""
