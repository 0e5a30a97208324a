"""Boundary adapters for external collaborators (vector index, embeddings)."""
