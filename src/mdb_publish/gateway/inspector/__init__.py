"""Artifact inspection gateway.

Loads a built debugger module into a live debugger and reads back the build
tag embedded in it.

Import from submodules:
- abc: ArtifactInspector
- real: MdbArtifactInspector
- fake: FakeArtifactInspector
- types: ArtifactInspection, InspectionTimeoutError
- parsing: parse_tag_reply
"""
