"""
Layout resolution, section registry and site assembly.

The public entry point is ``build_website``; import it from
``vibesmith.engine.site_builder``.
"""
