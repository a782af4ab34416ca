"""Utility helpers for notion2md."""
