"""Application layer: rule evaluators and the Certifier/Checker wrappers."""
