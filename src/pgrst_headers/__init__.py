"""Request header introspection for code running behind a PostgREST gateway."""
