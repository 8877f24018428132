"""ACN (Animal Care Net) pet storefront backend."""
