"""Protocol buffer contracts (.proto files) for the gRPC API."""
