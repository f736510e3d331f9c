"""Utility helpers for luxoria."""
