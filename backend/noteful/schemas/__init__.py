"""Pydantic request/response schemas and the sanitizing serializers."""
