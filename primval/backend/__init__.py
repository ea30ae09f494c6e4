"""Target-dependent facts about integer types (pointer width, bit widths)."""
