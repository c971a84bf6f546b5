"""Applications built on the Lorentz kernel."""
