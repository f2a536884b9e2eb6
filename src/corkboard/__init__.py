"""Kanban board model with change propagation and drag payloads."""
