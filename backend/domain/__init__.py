"""Domain layer for user records.

Entities, value objects, ports and exceptions, decoupled from the
datastore driver and from any transport in front of the service.
"""
