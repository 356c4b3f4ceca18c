# Services package init
"""
Notes API — Services Layer
============================

What:  Business logic between routes (HTTP) and the store (persistence).

Service Inventory:
    - NoteService: create / list_all / get_one / update / delete, with
      content validation and store-error mapping
"""
