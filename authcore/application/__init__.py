"""Application layer: use cases, DTOs and outbound ports."""
