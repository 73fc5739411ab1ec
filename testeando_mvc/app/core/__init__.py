"""Core plumbing: configuration, logging and the in‑memory store."""
