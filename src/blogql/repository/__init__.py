"""Query and mutation operations over a DataStore.

Functions take the store as their first argument and return stored records
(or ``None`` for lookups that find nothing).
"""
