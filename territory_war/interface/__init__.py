"""Interactive text layer: prompts, rendering and level loops."""
