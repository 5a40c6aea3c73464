"""Application layer for permission grants."""
