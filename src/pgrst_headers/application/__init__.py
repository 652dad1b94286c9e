"""Application layer - header lookups, signal derivation and policy predicates."""
