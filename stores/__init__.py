"""Store verticals: each ships a catalog, its pricing rules and an API router."""
