"""Graph anonymisation against attribute and identity disclosure attacks."""
