"""Domain layer (breed records and search).

Domain modules should not depend on UI or on HTTP. The API client decodes
into these types; the UI only reads them.
"""
