"""Application layer - ports for the encoding adapters."""
