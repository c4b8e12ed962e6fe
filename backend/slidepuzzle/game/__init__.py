"""Client-side game core.

Pure game mechanics that a front-end drives: the tile board, level table,
scoring rules, the per-level countdown and the screen state machine. Nothing
here touches Flask; the controller talks to the server only through
``slidepuzzle.client.api``.
"""
