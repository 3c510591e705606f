# Services package init
"""
RecordBook Backend — Services Layer
=====================================

Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - RecordService: create / update / toggle / list / get for one
      EntityDescriptor; one instance per record collection.
"""
