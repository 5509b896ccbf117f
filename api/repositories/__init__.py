"""
Persistence adapters.

``json_storage`` owns the canonical talker document; ``sql_repository`` is
the read path over the relational copy. Services depend on these modules
rather than touching the file or the engine directly.
"""
