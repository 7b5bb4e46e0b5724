"""Git tag operations gateway.

Import from submodules:
- abc: GitTagOps
- real: RealGitTagOps
- fake: FakeGitTagOps
- types: TagCreated, TagCreateFailed
"""
