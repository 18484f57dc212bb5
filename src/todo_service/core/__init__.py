"""Core types shared by connectors: AppState and ports."""
