"""Release publisher for the mdb_v8 debugger module."""
