"""Clock operations, abstracted so polling loops run instantly in tests."""
