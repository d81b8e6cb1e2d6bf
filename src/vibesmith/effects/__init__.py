"""
Client-side visual effects: scroll reveal, parallax and texture overlays.

Every effect produces CSS plus, where needed, a small inline script.
"""
