"""Value types for items and rule configuration."""
