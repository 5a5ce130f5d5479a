"""Service layer: the validation pipeline and its ServiceResult adapters.

Services may import from the domain layer.
They must never import from commands or output.
"""
