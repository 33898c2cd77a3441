# Services package init
"""
Notes API — Services Layer
===========================

What:  Business logic sitting between routes (HTTP) and the note store.
Why:   Routes handle HTTP, services handle rules. NoteService can be tested
       with a bare NoteStore and no HTTP client at all.

Service Inventory:
    - NoteService: CRUD on notes plus the ownership policy
"""
