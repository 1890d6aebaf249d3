# MainApp Primitives Directory
"""
This directory contains primitive operation implementations for MainApp.
Primitives are registered through `PrimitiveSpec` contracts and resolved
by `PrimitiveRegistry` with deterministic namespace rules.
"""
