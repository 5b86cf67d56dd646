"""
Service layer.

Rating computation, request validation, filter translation, the SQLite
record store and the ``ShipService`` that ties them together.  API
handlers only talk to ``ShipService`` and the validation functions.
"""
