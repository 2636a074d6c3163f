"""GraphQL cart items resolver with a pluggable product catalog."""
