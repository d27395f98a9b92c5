"""VMAF filter graph synthesis."""
