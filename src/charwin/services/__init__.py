"""Service layer — stateful console session over the domain model.

INVARIANT: All service methods return ServiceResult.
"""
