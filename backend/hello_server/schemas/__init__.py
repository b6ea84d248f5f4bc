"""Pydantic request/response models shared by the route handlers."""
