"""Library packages: the Lorentz core, its service runtime and observability."""
