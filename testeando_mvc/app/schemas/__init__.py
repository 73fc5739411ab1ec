"""
Pydantic view models.

The controller builds one of these per request and hands it to the
matching view in ``views``.  Keeping them separate from the services
decouples what a page shows from how the values are computed.
"""
