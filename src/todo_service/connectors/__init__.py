"""Transports that expose the task store."""
