"""Tool availability lookups.

Import from submodules:
- abc: Shell
- real: RealShell
- fake: FakeShell
"""
