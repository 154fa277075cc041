"""Infrastructure: concrete implementations of the domain ports."""
