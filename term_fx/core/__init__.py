"""term_fx.core — Foundation layer.

Contains the colour types, HSV conversion, ANSI palette matching, cube
quantization, the escape-sequence encoder, and environment handling.
This module has NO dependencies on term_fx.commands or term_fx.registry.
Only stdlib and numpy are allowed here.
"""
