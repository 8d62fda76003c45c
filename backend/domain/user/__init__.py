"""User domain module.

This domain manages user records keyed by email address.
Persistence goes through the IDatastore port; the datastore is the only
owner of user state.
"""
