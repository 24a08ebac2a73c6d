"""Infrastructure layer: configuration, adapters and wiring."""
