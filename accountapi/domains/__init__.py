"""Domain layer (account resources and the error taxonomy).

Domain modules do not depend on the transport. HTTP access is injected into
services via the HTTPTransport interface.
"""
