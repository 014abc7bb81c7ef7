"""Application layer – bus, registry, handlers and simulation wiring."""
