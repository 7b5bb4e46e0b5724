"""Interactive operator prompts.

Import from submodules:
- abc: Console
- real: InteractiveConsole
- fake: FakeConsole
"""
