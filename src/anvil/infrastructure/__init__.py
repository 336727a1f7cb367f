"""Infrastructure: persisting artifacts and checking an existing setup."""
