"""Printeez: print-on-demand apparel store backend."""
