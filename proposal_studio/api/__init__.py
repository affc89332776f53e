"""HTTP API for Proposal Studio."""
