"""Remote object store gateway.

Import from submodules:
- abc: ObjectStore
- real: MantaObjectStore
- fake: FakeObjectStore
- types: StoreEntry
"""
