"""Core domain of the upload pipeline: entities, value objects, protocols, exceptions."""
